"""Agent side: ship local reports to a collector."""

from baseline_audit.agent.client import CollectorClient, SubmissionReceipt

__all__ = ["CollectorClient", "SubmissionReceipt"]
