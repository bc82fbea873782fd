"""Closed enumerations shared across the classification engine."""

from enum import Enum


class Domain(str, Enum):
    """Top-level business domains.

    Every intent, pattern set, workflow, context step and prompt template
    belongs to exactly one of these.
    """

    LEAD_GENERATION = "lead_generation"
    COMMUNICATION = "communication"
    SITE_ASSESSMENT = "site_assessment"
    QUOTING = "quoting"
    JOB_MANAGEMENT = "job_management"
    SCHEDULING = "scheduling"
    TIME_TRACKING = "time_tracking"
    INVOICING = "invoicing"
    PAYMENT_PROCESSING = "payment_processing"
    RECURRING_BILLING = "recurring_billing"
    TEAM_MANAGEMENT = "team_management"
    CHECKLISTS = "checklists"


class IntentCategory(str, Enum):
    """Display category of an intent.

    - CREATE / READ / UPDATE / DELETE: record operations
    - ACTION: does something outside the record store (send, charge, ...)
    - QUERY: answers a question from aggregated data
    """

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    ACTION = "action"
    QUERY = "query"


class IntentEffect(str, Enum):
    """Side effects an intent has once acted upon.

    - MOVES_MONEY: charges, refunds or records money
    - EXTERNAL_COMMUNICATION: sends something to a customer or worker
    - DESTRUCTIVE: cancels or deletes a record
    """

    MOVES_MONEY = "moves_money"
    EXTERNAL_COMMUNICATION = "external_communication"
    DESTRUCTIVE = "destructive"


class RiskLevel(str, Enum):
    """Risk classification carried into built prompts."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class EntityType(str, Enum):
    """Typed entities the extractor can produce.

    Identifier types are split by what they identify so intents can
    require e.g. a job id specifically; REFERENCE_ID covers codes whose
    kind cannot be told from the text.
    """

    DATE = "date"
    DATE_RANGE = "date_range"
    TIME = "time"
    DURATION = "duration"
    MONEY = "money"
    PERCENTAGE = "percentage"
    JOB_ID = "job_id"
    QUOTE_ID = "quote_id"
    INVOICE_ID = "invoice_id"
    CUSTOMER_ID = "customer_id"
    PAYMENT_ID = "payment_id"
    REFERENCE_ID = "reference_id"
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    ADDRESS = "address"
    NOTE = "note"
    FREQUENCY = "frequency"
    PAYMENT_METHOD = "payment_method"
