"""Shipped domain and intent catalog.

Registration order matters: it is the final tie-break in classification.
"""

from switchboard.taxonomy.enums import (
    Domain,
    EntityType,
    IntentCategory,
    IntentEffect,
    RiskLevel,
)
from switchboard.taxonomy.models import DomainMetadata, IntentDefinition

E = EntityType
C = IntentCategory
MONEY = frozenset({IntentEffect.MOVES_MONEY})
OUTBOUND = frozenset({IntentEffect.EXTERNAL_COMMUNICATION})
DESTRUCTIVE = frozenset({IntentEffect.DESTRUCTIVE})

DOMAINS: tuple[DomainMetadata, ...] = (
    DomainMetadata(
        domain=Domain.LEAD_GENERATION,
        label="Lead Generation",
        description="Capturing new leads and maintaining customer records",
        route_prefixes=("/customers", "/leads", "/requests"),
    ),
    DomainMetadata(
        domain=Domain.COMMUNICATION,
        label="Communication",
        description="Messaging customers and the customer portal",
        route_prefixes=("/inbox", "/messages", "/conversations"),
    ),
    DomainMetadata(
        domain=Domain.SITE_ASSESSMENT,
        label="Site Assessment",
        description="Property visits ahead of quoting",
        route_prefixes=("/assessments",),
    ),
    DomainMetadata(
        domain=Domain.QUOTING,
        label="Quoting",
        description="Estimates, approvals and conversion into jobs",
        route_prefixes=("/quotes", "/estimates"),
    ),
    DomainMetadata(
        domain=Domain.JOB_MANAGEMENT,
        label="Job Management",
        description="Work orders, their status and assignments",
        route_prefixes=("/jobs", "/work-orders"),
    ),
    DomainMetadata(
        domain=Domain.SCHEDULING,
        label="Scheduling",
        description="Calendar placement, availability and routing",
        route_prefixes=("/calendar", "/schedule", "/dispatch"),
    ),
    DomainMetadata(
        domain=Domain.TIME_TRACKING,
        label="Time Tracking",
        description="Clocking in and out and logging hours",
        route_prefixes=("/timesheets", "/time-tracking"),
    ),
    DomainMetadata(
        domain=Domain.INVOICING,
        label="Invoicing",
        description="Invoice creation, delivery and reminders",
        route_prefixes=("/invoices",),
    ),
    DomainMetadata(
        domain=Domain.PAYMENT_PROCESSING,
        label="Payments",
        description="Recording, charging and refunding payments",
        route_prefixes=("/payments",),
    ),
    DomainMetadata(
        domain=Domain.RECURRING_BILLING,
        label="Recurring Billing",
        description="Subscriptions and recurring service plans",
        route_prefixes=("/subscriptions", "/recurring"),
    ),
    DomainMetadata(
        domain=Domain.TEAM_MANAGEMENT,
        label="Team",
        description="Team members, availability and time off",
        route_prefixes=("/team", "/settings/team"),
    ),
    DomainMetadata(
        domain=Domain.CHECKLISTS,
        label="Checklists",
        description="Checklist templates and task completion on jobs",
        route_prefixes=("/checklists",),
    ),
)


def _intent(
    intent_id: str,
    domain: Domain,
    name: str,
    description: str,
    category: IntentCategory,
    required: tuple[EntityType, ...] = (),
    optional: tuple[EntityType, ...] = (),
    risk: RiskLevel = RiskLevel.LOW,
    confirm: bool = False,
    effects: frozenset[IntentEffect] = frozenset(),
) -> IntentDefinition:
    return IntentDefinition(
        id=intent_id,
        domain=domain,
        name=name,
        description=description,
        category=category,
        required_entities=required,
        optional_entities=optional,
        risk_level=risk,
        confirmation_required=confirm,
        effects=effects,
    )


_LEADS = (
    _intent(
        "create_lead", Domain.LEAD_GENERATION, "Create Lead",
        "Capture a new lead or customer record", C.CREATE,
        required=(E.NAME,), optional=(E.PHONE, E.EMAIL, E.ADDRESS, E.NOTE),
    ),
    _intent(
        "search_customer", Domain.LEAD_GENERATION, "Search Customers",
        "Find an existing customer", C.QUERY,
        optional=(E.NAME, E.EMAIL, E.PHONE, E.CUSTOMER_ID),
    ),
    _intent(
        "update_customer", Domain.LEAD_GENERATION, "Update Customer",
        "Change contact details on a customer record", C.UPDATE,
        required=(E.NAME,), optional=(E.EMAIL, E.PHONE, E.ADDRESS, E.CUSTOMER_ID),
    ),
    _intent(
        "view_customer_history", Domain.LEAD_GENERATION, "Customer History",
        "Show past jobs, quotes and payments for a customer", C.READ,
        optional=(E.NAME, E.CUSTOMER_ID, E.DATE_RANGE),
    ),
    _intent(
        "import_customers", Domain.LEAD_GENERATION, "Import Customers",
        "Bulk import customers from a file", C.ACTION,
        risk=RiskLevel.MEDIUM, confirm=True,
    ),
)

_COMMUNICATION = (
    _intent(
        "contact_customer", Domain.COMMUNICATION, "Contact Customer",
        "Call, text or email a customer", C.ACTION,
        optional=(E.NAME, E.PHONE, E.EMAIL, E.NOTE),
        risk=RiskLevel.MEDIUM, confirm=True, effects=OUTBOUND,
    ),
    _intent(
        "follow_up", Domain.COMMUNICATION, "Follow Up",
        "Follow up with a customer on an open item", C.ACTION,
        optional=(E.NAME, E.DATE, E.NOTE),
        risk=RiskLevel.MEDIUM, confirm=True, effects=OUTBOUND,
    ),
    _intent(
        "reply_to_message", Domain.COMMUNICATION, "Reply to Message",
        "Answer an inbound customer message", C.ACTION,
        required=(E.NOTE,), optional=(E.NAME,),
        risk=RiskLevel.MEDIUM, confirm=True, effects=OUTBOUND,
    ),
    _intent(
        "view_messages", Domain.COMMUNICATION, "View Messages",
        "Show the customer inbox", C.READ,
        optional=(E.NAME, E.DATE_RANGE),
    ),
    _intent(
        "send_portal_invite", Domain.COMMUNICATION, "Portal Invite",
        "Invite a customer to the customer portal", C.ACTION,
        required=(E.NAME,), optional=(E.EMAIL,),
        risk=RiskLevel.MEDIUM, confirm=True, effects=OUTBOUND,
    ),
)

_ASSESSMENTS = (
    _intent(
        "schedule_assessment", Domain.SITE_ASSESSMENT, "Schedule Assessment",
        "Book a site visit to assess a property", C.ACTION,
        required=(E.DATE,), optional=(E.TIME, E.ADDRESS, E.NAME),
        risk=RiskLevel.MEDIUM, confirm=True, effects=OUTBOUND,
    ),
    _intent(
        "complete_assessment", Domain.SITE_ASSESSMENT, "Complete Assessment",
        "Record that a site assessment is finished", C.UPDATE,
        optional=(E.ADDRESS, E.NAME, E.NOTE),
    ),
    _intent(
        "generate_assessment_report", Domain.SITE_ASSESSMENT, "Assessment Report",
        "Write up the findings of a site visit", C.ACTION,
        optional=(E.NAME, E.JOB_ID),
    ),
)

_QUOTING = (
    _intent(
        "create_quote", Domain.QUOTING, "Create Quote",
        "Draft a new quote for a customer", C.CREATE,
        required=(E.NAME,), optional=(E.MONEY, E.ADDRESS, E.NOTE),
    ),
    _intent(
        "send_quote", Domain.QUOTING, "Send Quote",
        "Deliver a quote to the customer", C.ACTION,
        required=(E.QUOTE_ID,), optional=(E.EMAIL, E.NAME),
        risk=RiskLevel.MEDIUM, confirm=True, effects=OUTBOUND,
    ),
    _intent(
        "approve_quote", Domain.QUOTING, "Approve Quote",
        "Mark a quote as accepted by the customer", C.UPDATE,
        required=(E.QUOTE_ID,),
        risk=RiskLevel.MEDIUM, confirm=True,
    ),
    _intent(
        "convert_quote_to_job", Domain.QUOTING, "Convert Quote to Job",
        "Turn an approved quote into a work order", C.ACTION,
        required=(E.QUOTE_ID,), optional=(E.DATE,),
        risk=RiskLevel.MEDIUM, confirm=True,
    ),
    _intent(
        "revise_quote", Domain.QUOTING, "Revise Quote",
        "Change line items or pricing on a quote", C.UPDATE,
        required=(E.QUOTE_ID,), optional=(E.MONEY, E.PERCENTAGE, E.NOTE),
    ),
)

_JOBS = (
    _intent(
        "create_job", Domain.JOB_MANAGEMENT, "Create Job",
        "Open a new work order", C.CREATE,
        required=(E.NAME,), optional=(E.ADDRESS, E.DATE, E.TIME, E.NOTE),
    ),
    _intent(
        "update_job_status", Domain.JOB_MANAGEMENT, "Update Job Status",
        "Move a job to complete, on hold or in progress", C.UPDATE,
        required=(E.JOB_ID,),
    ),
    _intent(
        "assign_job", Domain.JOB_MANAGEMENT, "Assign Job",
        "Assign a team member to a job", C.UPDATE,
        required=(E.JOB_ID, E.NAME),
    ),
    _intent(
        "view_job", Domain.JOB_MANAGEMENT, "View Job",
        "Show the details of a job", C.READ,
        required=(E.JOB_ID,),
    ),
    _intent(
        "add_job_note", Domain.JOB_MANAGEMENT, "Add Job Note",
        "Attach a note to a job", C.UPDATE,
        required=(E.JOB_ID, E.NOTE),
    ),
    _intent(
        "cancel_job", Domain.JOB_MANAGEMENT, "Cancel Job",
        "Cancel or delete a job", C.DELETE,
        required=(E.JOB_ID,),
        risk=RiskLevel.HIGH, confirm=True, effects=DESTRUCTIVE,
    ),
)

_SCHEDULING = (
    _intent(
        "schedule_job", Domain.SCHEDULING, "Schedule Job",
        "Put a job on the calendar", C.ACTION,
        required=(E.JOB_ID, E.DATE), optional=(E.TIME, E.NAME),
        risk=RiskLevel.MEDIUM, confirm=True, effects=OUTBOUND,
    ),
    _intent(
        "reschedule_job", Domain.SCHEDULING, "Reschedule Job",
        "Move a scheduled job to another date", C.UPDATE,
        required=(E.JOB_ID, E.DATE), optional=(E.TIME,),
        risk=RiskLevel.MEDIUM, confirm=True, effects=OUTBOUND,
    ),
    _intent(
        "batch_schedule", Domain.SCHEDULING, "Batch Schedule",
        "Schedule every unscheduled job in a period", C.ACTION,
        required=(E.DATE_RANGE,),
        risk=RiskLevel.MEDIUM, confirm=True,
    ),
    _intent(
        "check_availability", Domain.SCHEDULING, "Check Availability",
        "Find free slots on the team calendar", C.QUERY,
        optional=(E.DATE, E.DATE_RANGE, E.TIME, E.NAME),
    ),
    _intent(
        "optimize_route", Domain.SCHEDULING, "Optimize Route",
        "Order a day's visits for the shortest drive", C.ACTION,
        required=(E.DATE,),
    ),
    _intent(
        "get_capacity", Domain.SCHEDULING, "Capacity",
        "Report booked versus available hours", C.QUERY,
        required=(E.DATE_RANGE,),
    ),
)

_TIME = (
    _intent(
        "clock_in", Domain.TIME_TRACKING, "Clock In",
        "Start the timer for the current user", C.ACTION,
        optional=(E.JOB_ID, E.TIME),
    ),
    _intent(
        "clock_out", Domain.TIME_TRACKING, "Clock Out",
        "Stop the timer for the current user", C.ACTION,
        optional=(E.JOB_ID, E.TIME),
    ),
    _intent(
        "log_time", Domain.TIME_TRACKING, "Log Time",
        "Record hours worked after the fact", C.CREATE,
        required=(E.DURATION,), optional=(E.JOB_ID, E.DATE, E.NAME),
    ),
    _intent(
        "view_timesheet", Domain.TIME_TRACKING, "View Timesheet",
        "Show hours worked in a period", C.READ,
        optional=(E.NAME, E.DATE_RANGE),
    ),
)

_INVOICING = (
    _intent(
        "create_invoice", Domain.INVOICING, "Create Invoice",
        "Bill a customer for completed work", C.CREATE,
        optional=(E.NAME, E.JOB_ID, E.MONEY),
        risk=RiskLevel.MEDIUM, confirm=True, effects=MONEY,
    ),
    _intent(
        "send_invoice", Domain.INVOICING, "Send Invoice",
        "Deliver an invoice to the customer", C.ACTION,
        required=(E.INVOICE_ID,), optional=(E.EMAIL, E.NAME),
        risk=RiskLevel.MEDIUM, confirm=True, effects=OUTBOUND,
    ),
    _intent(
        "void_invoice", Domain.INVOICING, "Void Invoice",
        "Void an issued invoice", C.DELETE,
        required=(E.INVOICE_ID,),
        risk=RiskLevel.HIGH, confirm=True, effects=MONEY | DESTRUCTIVE,
    ),
    _intent(
        "send_payment_reminder", Domain.INVOICING, "Payment Reminder",
        "Remind a customer about an unpaid balance", C.ACTION,
        optional=(E.INVOICE_ID, E.NAME),
        risk=RiskLevel.MEDIUM, confirm=True, effects=OUTBOUND,
    ),
)

_PAYMENTS = (
    _intent(
        "record_payment", Domain.PAYMENT_PROCESSING, "Record Payment",
        "Record a payment received outside the card processor", C.CREATE,
        required=(E.MONEY,), optional=(E.INVOICE_ID, E.PAYMENT_METHOD, E.NAME, E.DATE),
        risk=RiskLevel.MEDIUM, confirm=True, effects=MONEY,
    ),
    _intent(
        "process_card_payment", Domain.PAYMENT_PROCESSING, "Charge Card",
        "Charge the customer's card on file", C.ACTION,
        required=(E.INVOICE_ID,), optional=(E.MONEY,),
        risk=RiskLevel.HIGH, confirm=True, effects=MONEY,
    ),
    _intent(
        "refund_payment", Domain.PAYMENT_PROCESSING, "Refund Payment",
        "Refund all or part of a payment", C.ACTION,
        required=(E.MONEY,), optional=(E.PAYMENT_ID, E.NAME),
        risk=RiskLevel.HIGH, confirm=True, effects=MONEY,
    ),
)

_RECURRING = (
    _intent(
        "create_recurring_plan", Domain.RECURRING_BILLING, "Create Recurring Plan",
        "Set up recurring service billing", C.CREATE,
        required=(E.FREQUENCY,), optional=(E.NAME, E.MONEY, E.DATE),
        risk=RiskLevel.MEDIUM, confirm=True, effects=MONEY,
    ),
    _intent(
        "pause_subscription", Domain.RECURRING_BILLING, "Pause Subscription",
        "Temporarily stop recurring billing", C.UPDATE,
        required=(E.NAME,), optional=(E.DATE,),
        risk=RiskLevel.MEDIUM, confirm=True, effects=MONEY,
    ),
    _intent(
        "resume_subscription", Domain.RECURRING_BILLING, "Resume Subscription",
        "Restart paused recurring billing", C.UPDATE,
        required=(E.NAME,), optional=(E.DATE,),
        risk=RiskLevel.MEDIUM, confirm=True, effects=MONEY,
    ),
    _intent(
        "cancel_subscription", Domain.RECURRING_BILLING, "Cancel Subscription",
        "End recurring billing for a customer", C.DELETE,
        required=(E.NAME,),
        risk=RiskLevel.HIGH, confirm=True, effects=MONEY | DESTRUCTIVE,
    ),
)

_TEAM = (
    _intent(
        "invite_team_member", Domain.TEAM_MANAGEMENT, "Invite Team Member",
        "Invite someone to join the team", C.ACTION,
        required=(E.EMAIL,), optional=(E.NAME,),
        risk=RiskLevel.MEDIUM, confirm=True, effects=OUTBOUND,
    ),
    _intent(
        "set_availability", Domain.TEAM_MANAGEMENT, "Set Availability",
        "Change a team member's working hours", C.UPDATE,
        required=(E.NAME,), optional=(E.DATE_RANGE, E.TIME),
    ),
    _intent(
        "request_time_off", Domain.TEAM_MANAGEMENT, "Request Time Off",
        "Ask for days off", C.CREATE,
        optional=(E.DATE, E.DATE_RANGE, E.NOTE),
    ),
    _intent(
        "approve_time_off", Domain.TEAM_MANAGEMENT, "Approve Time Off",
        "Approve pending time-off requests", C.ACTION,
        optional=(E.NAME,),
        risk=RiskLevel.MEDIUM, confirm=True, effects=OUTBOUND,
    ),
    _intent(
        "view_team_utilization", Domain.TEAM_MANAGEMENT, "Team Utilization",
        "Report how much of the team's time is billed", C.QUERY,
        optional=(E.DATE_RANGE, E.NAME),
    ),
)

_CHECKLISTS = (
    _intent(
        "create_checklist_template", Domain.CHECKLISTS, "Create Checklist Template",
        "Define a reusable checklist", C.CREATE,
    ),
    _intent(
        "assign_checklist", Domain.CHECKLISTS, "Assign Checklist",
        "Attach a checklist to a job", C.ACTION,
        required=(E.JOB_ID,),
    ),
    _intent(
        "complete_checklist_task", Domain.CHECKLISTS, "Complete Checklist Task",
        "Tick off an item on a job checklist", C.UPDATE,
        optional=(E.JOB_ID, E.NOTE),
    ),
    _intent(
        "view_checklist_progress", Domain.CHECKLISTS, "Checklist Progress",
        "Show how far a job's checklists have got", C.READ,
        optional=(E.JOB_ID,),
    ),
)

INTENTS: tuple[IntentDefinition, ...] = (
    *_LEADS,
    *_COMMUNICATION,
    *_ASSESSMENTS,
    *_QUOTING,
    *_JOBS,
    *_SCHEDULING,
    *_TIME,
    *_INVOICING,
    *_PAYMENTS,
    *_RECURRING,
    *_TEAM,
    *_CHECKLISTS,
)
