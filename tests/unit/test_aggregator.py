"""Unit tests for the ReportAggregator."""

import pytest

from baseline_audit.core.aggregator import ReportAggregator
from baseline_audit.core.requirements import FileRequirementSource
from baseline_audit.models.compliance import ComplianceStatus


@pytest.fixture
def aggregator(store, requirement_source):
    return ReportAggregator(store, requirement_source)


class TestIngest:
    """Tests for ReportAggregator.ingest."""

    def test_accepts_submission(self, aggregator, sample_submission):
        result = aggregator.ingest(sample_submission)

        assert result.success
        report = result.report
        assert report.system_name == "LAB-PC-02"
        assert report.cpu == "Intel Core Ultra 7 258V"
        assert report.received_at is not None
        assert aggregator.store.get("LAB-PC-02") == report

    def test_statuses_are_recomputed(self, aggregator, sample_submission):
        """Submitted statuses are ignored in both directions."""
        report = aggregator.ingest(sample_submission).report
        statuses = {r.component: r.status for r in report.compliance}

        assert statuses["Windows OS Build"] == ComplianceStatus.COMPLIANT
        assert statuses["System BIOS Version"] == ComplianceStatus.COMPLIANT
        assert statuses["GPU Driver Version"] == ComplianceStatus.NON_COMPLIANT
        assert statuses["NPU Driver Version"] == ComplianceStatus.NON_COMPLIANT

    def test_missing_minimum_filled_from_baseline(self, aggregator, sample_submission):
        report = aggregator.ingest(sample_submission).report
        gpu = next(r for r in report.compliance if r.component == "GPU Driver Version")
        assert gpu.minimum == "536.23"

    def test_submitted_minimum_is_kept(self, aggregator, sample_submission):
        report = aggregator.ingest(sample_submission).report
        bios = next(r for r in report.compliance if r.component == "System BIOS Version")
        assert bios.minimum == "FP7T100"

    def test_order_preserved(self, aggregator, sample_submission):
        report = aggregator.ingest(sample_submission).report
        assert [r.component for r in report.compliance] == [
            entry["component"] for entry in sample_submission["compliance"]
        ]

    def test_identity_only(self, aggregator):
        result = aggregator.ingest({"systemName": "LAB-PC-03"})

        assert result.success
        assert result.report.compliance == []
        assert "LAB-PC-03" in aggregator.store

    def test_numeric_versions_coerced(self, aggregator):
        result = aggregator.ingest(
            {
                "systemName": "LAB-PC-04",
                "compliance": [{"component": "Windows OS Build", "current": 26100}],
            }
        )
        record = result.report.compliance[0]
        assert record.current == "26100"
        assert record.compliant

    def test_unknown_component(self, aggregator):
        result = aggregator.ingest(
            {
                "systemName": "LAB-PC-05",
                "compliance": [{"component": "Chipset Driver", "current": "10.1"}],
            }
        )
        record = result.report.compliance[0]
        assert record.minimum == "Unknown"
        assert not record.compliant

    def test_uses_current_baseline(self, store, requirements_file, sample_submission):
        """The baseline is read on every ingest."""
        aggregator = ReportAggregator(store, FileRequirementSource(requirements_file))
        report = aggregator.ingest(sample_submission).report
        os_build = report.compliance[0]

        assert os_build.minimum == "26100"  # submitted minimum wins over the file
        gpu = report.compliance[2]
        assert gpu.minimum == "560.0"
        assert not gpu.compliant

    def test_last_write_wins(self, aggregator, sample_submission):
        aggregator.ingest(sample_submission)
        updated = dict(sample_submission, gpu="NVIDIA RTX 4070")
        aggregator.ingest(updated)

        reports = aggregator.reports()
        assert len(reports) == 1
        assert reports["LAB-PC-02"].gpu == "NVIDIA RTX 4070"


class TestRejection:
    """Invalid submissions are rejected without touching the store."""

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"systemName": ""},
            {"systemName": None},
            {"systemName": 42},
            {"manufacturer": "Contoso"},
            None,
            ["LAB-PC-01"],
            "LAB-PC-01",
        ],
    )
    def test_missing_system_name(self, aggregator, payload):
        result = aggregator.ingest(payload)

        assert not result.success
        assert result.errors[0].code == "MISSING_SYSTEM_NAME"
        assert result.first_error == "Missing systemName in request body"
        assert len(aggregator.store) == 0

    def test_malformed_compliance(self, aggregator):
        result = aggregator.ingest({"systemName": "LAB-PC-01", "compliance": "all good"})

        assert not result.success
        assert result.errors[0].code == "INVALID_PAYLOAD"
        assert len(aggregator.store) == 0

    def test_entry_without_component(self, aggregator):
        result = aggregator.ingest({"systemName": "LAB-PC-01", "compliance": [{"current": "1.0"}]})

        assert not result.success
        assert result.errors[0].code == "INVALID_PAYLOAD"

    def test_rejection_keeps_previous_report(self, aggregator, sample_submission):
        aggregator.ingest(sample_submission)
        aggregator.ingest({"systemName": "LAB-PC-02", "compliance": 7})

        assert aggregator.store.get("LAB-PC-02").cpu == "Intel Core Ultra 7 258V"
