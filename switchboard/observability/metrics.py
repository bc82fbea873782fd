"""Prometheus metrics for switchboard.

Recorded by the host-facing engine only; the classification core stays
free of side effects beyond debug logging.
"""

from prometheus_client import Counter, Histogram

CLASSIFICATIONS = Counter(
    "switchboard_classifications_total",
    "Total number of utterances classified",
    labelnames=["domain", "outcome"],
)

CLASSIFICATION_LATENCY = Histogram(
    "switchboard_classification_latency_seconds",
    "Time spent classifying one utterance",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25),
)

WORKFLOW_MATCHES = Counter(
    "switchboard_workflow_matches_total",
    "Total number of utterances recognized as multi-step workflows",
    labelnames=["workflow_id"],
)

CLARIFICATIONS_REQUESTED = Counter(
    "switchboard_clarifications_requested_total",
    "Total number of classifications that asked the user for more detail",
    labelnames=["reason"],
)

ENTITIES_EXTRACTED = Counter(
    "switchboard_entities_extracted_total",
    "Total number of entities extracted from utterances",
    labelnames=["entity_type"],
)

PROMPT_BUILDS = Counter(
    "switchboard_prompt_builds_total",
    "Total number of prompt build attempts",
    labelnames=["template_id", "status"],
)


def setup_metrics() -> None:
    """Initialize metrics configuration.

    Instruments register with the default registry when this module is
    imported; the hook exists so hosts have a single startup call.
    """
