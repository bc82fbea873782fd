"""Context declared for every domain's process steps.

Shared groups (business, customer, job, quote, invoice) are built per
domain so each field carries the domain that owns it.
"""

from functools import partial

from switchboard.context.models import (
    ContextField,
    ContextPriority,
    DomainContext,
    ProcessStepContext,
    SourceType,
    ValueKind,
)
from switchboard.taxonomy.enums import Domain

RECORD = SourceType.RECORD_LOOKUP
AGGREGATE = SourceType.AGGREGATE_QUERY
STATIC = SourceType.STATIC_LIST
SESSION = SourceType.SESSION
DERIVED = SourceType.DERIVED
EXTERNAL = SourceType.EXTERNAL

LIST = ValueKind.LIST
OBJECT = ValueKind.RECORD


def _field(
    domain: Domain,
    key: str,
    source_type: SourceType,
    description: str,
    source_detail: str = "",
    *,
    required: bool = False,
    kind: ValueKind = ValueKind.SCALAR,
    cache_seconds: int | None = None,
    depends_on: tuple[str, ...] = (),
) -> ContextField:
    return ContextField(
        key=key,
        source_type=source_type,
        priority=ContextPriority.REQUIRED if required else ContextPriority.OPTIONAL,
        domain=domain,
        description=description,
        source_detail=source_detail,
        value_kind=kind,
        cache_seconds=cache_seconds,
        depends_on=depends_on,
    )


def _business_context(domain: Domain) -> tuple[ContextField, ...]:
    field = partial(_field, domain)
    return (
        field("business_id", SESSION, "Current business id", "session.business_id", required=True),
        field("business_name", RECORD, "Business display name", "businesses.name",
              required=True, cache_seconds=3600, depends_on=("business_id",)),
        field("user_id", SESSION, "Current user id", "session.user_id", required=True),
        field("user_name", SESSION, "Current user full name", "session.user_name", required=True),
        field("user_role", DERIVED, "Role of the user in the business (owner, admin, worker)",
              "businesses.owner_id == user_id", required=True, depends_on=("user_id", "business_id")),
        field("business_timezone", RECORD, "Business timezone", "businesses.timezone",
              cache_seconds=3600, depends_on=("business_id",)),
    )


def _customer_context(domain: Domain) -> tuple[ContextField, ...]:
    field = partial(_field, domain)
    return (
        field("customer_id", RECORD, "Customer id", "customers.id", required=True),
        field("customer_name", RECORD, "Customer display name", "customers.name",
              required=True, depends_on=("customer_id",)),
        field("customer_email", RECORD, "Customer email address", "customers.email",
              depends_on=("customer_id",)),
        field("customer_phone", RECORD, "Customer phone number", "customers.phone",
              depends_on=("customer_id",)),
        field("customer_address", RECORD, "Customer default service address", "customers.address",
              depends_on=("customer_id",)),
        field("scheduling_preferences", RECORD, "Preferred days, time window and days to avoid",
              "customers.preferred_days, preferred_time_window, avoid_days",
              kind=OBJECT, depends_on=("customer_id",)),
    )


def _job_context(domain: Domain) -> tuple[ContextField, ...]:
    field = partial(_field, domain)
    return (
        field("job_id", RECORD, "Job id", "jobs.id", required=True),
        field("job_title", RECORD, "Job title", "jobs.title", depends_on=("job_id",)),
        field("job_status", RECORD, "Current job status", "jobs.status", required=True, depends_on=("job_id",)),
        field("job_address", RECORD, "Service address of the job", "jobs.address", depends_on=("job_id",)),
        field("job_starts_at", RECORD, "Scheduled start", "jobs.starts_at", depends_on=("job_id",)),
        field("assigned_members", AGGREGATE, "Team members assigned to the job",
              "job_assignments WHERE job_id = ?", kind=LIST, depends_on=("job_id",)),
    )


def _quote_context(domain: Domain) -> tuple[ContextField, ...]:
    field = partial(_field, domain)
    return (
        field("quote_id", RECORD, "Quote id", "quotes.id", required=True),
        field("quote_number", RECORD, "Human-readable quote number", "quotes.number",
              required=True, depends_on=("quote_id",)),
        field("quote_status", RECORD, "Quote status", "quotes.status", required=True, depends_on=("quote_id",)),
        field("quote_total", RECORD, "Quote total in cents", "quotes.total", required=True, depends_on=("quote_id",)),
        field("quote_line_items", AGGREGATE, "Line items on the quote", "quote_line_items WHERE quote_id = ?",
              kind=LIST, depends_on=("quote_id",)),
    )


def _invoice_context(domain: Domain) -> tuple[ContextField, ...]:
    field = partial(_field, domain)
    return (
        field("invoice_id", RECORD, "Invoice id", "invoices.id", required=True),
        field("invoice_number", RECORD, "Human-readable invoice number", "invoices.number",
              required=True, depends_on=("invoice_id",)),
        field("invoice_status", RECORD, "Invoice status", "invoices.status",
              required=True, depends_on=("invoice_id",)),
        field("invoice_total", RECORD, "Invoice total in cents", "invoices.total",
              required=True, depends_on=("invoice_id",)),
        field("invoice_due_date", RECORD, "Invoice due date", "invoices.due_at", depends_on=("invoice_id",)),
        field("amount_due", DERIVED, "Outstanding balance in cents", "invoice_total - SUM(payments.amount)",
              depends_on=("invoice_id", "invoice_total")),
    )


def _team_members(domain: Domain, required: bool = False) -> ContextField:
    return _field(domain, "team_members", AGGREGATE, "Active team members with roles",
                  "business_members WHERE business_id = ?", required=required, kind=LIST,
                  cache_seconds=300, depends_on=("business_id",))


def _service_catalog(domain: Domain) -> ContextField:
    return _field(domain, "service_catalog", STATIC, "Services offered with default prices",
                  "service_items WHERE business_id = ?", kind=LIST, cache_seconds=3600,
                  depends_on=("business_id",))


def _tax_rate(domain: Domain) -> ContextField:
    return _field(domain, "tax_rate_default", RECORD, "Default tax rate", "businesses.tax_rate_default",
                  cache_seconds=3600, depends_on=("business_id",))


def _available_slots(domain: Domain) -> ContextField:
    return _field(domain, "available_slots", AGGREGATE, "Open calendar slots for the next two weeks",
                  "check_availability(business_id, 14 days)", kind=LIST, cache_seconds=60,
                  depends_on=("business_id",))


def _lead_generation() -> DomainContext:
    domain = Domain.LEAD_GENERATION
    field = partial(_field, domain)
    existing_customers = field(
        "existing_customers", AGGREGATE, "Existing customers for duplicate detection",
        "customers WHERE business_id = ?", kind=LIST, cache_seconds=60, depends_on=("business_id",),
    )
    return DomainContext(
        domain=domain,
        name="Lead Generation",
        description="Capturing leads and maintaining customer records",
        shared_fields=_business_context(domain),
        steps=(
            ProcessStepContext(
                domain=domain,
                step="create_lead",
                name="Create Lead",
                description="Add a new lead or customer",
                fields=(
                    existing_customers,
                    field("lead_sources", STATIC, "Configured lead sources", "lead_sources",
                          kind=LIST, cache_seconds=3600, depends_on=("business_id",)),
                    _team_members(domain),
                ),
                preconditions=("User has business access",),
                postconditions=("Customer record created", "customer_id available"),
            ),
            ProcessStepContext(
                domain=domain,
                step="update_customer",
                name="Update Customer",
                description="Change details on an existing customer",
                fields=(
                    *_customer_context(domain),
                    field("customer_jobs_count", AGGREGATE, "Number of jobs for the customer",
                          "COUNT(jobs) WHERE customer_id = ?", depends_on=("customer_id",)),
                    field("customer_invoices_total", AGGREGATE, "Total invoiced to the customer",
                          "SUM(invoices.total) WHERE customer_id = ?", depends_on=("customer_id",)),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="review_customer",
                name="Review Customer",
                description="Summarize a customer's history",
                fields=(
                    *_customer_context(domain),
                    field("recent_jobs", AGGREGATE, "Last ten jobs for the customer",
                          "jobs WHERE customer_id = ? ORDER BY starts_at DESC LIMIT 10",
                          kind=LIST, depends_on=("customer_id",)),
                    field("outstanding_balance", AGGREGATE, "Unpaid balance in cents",
                          "SUM(invoices.amount_due) WHERE customer_id = ?", depends_on=("customer_id",)),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="import_customers",
                name="Import Customers",
                description="Map an uploaded file onto customer fields",
                fields=(
                    field("import_columns", DERIVED, "Column headers of the uploaded file",
                          "parsed from the upload header row", required=True, kind=LIST),
                    existing_customers,
                ),
            ),
        ),
    )


def _communication() -> DomainContext:
    domain = Domain.COMMUNICATION
    field = partial(_field, domain)
    return DomainContext(
        domain=domain,
        name="Communication",
        description="Messages, follow-ups and portal access",
        shared_fields=_business_context(domain),
        steps=(
            ProcessStepContext(
                domain=domain,
                step="contact_customer",
                name="Contact Customer",
                description="Draft and send a message to a customer",
                fields=(
                    *_customer_context(domain),
                    field("recent_messages", AGGREGATE, "Last messages exchanged with the customer",
                          "messages WHERE customer_id = ? ORDER BY sent_at DESC LIMIT 20",
                          kind=LIST, depends_on=("customer_id",)),
                    field("preferred_channel", DERIVED, "sms when a phone is on file, else email",
                          "customer_phone ? 'sms' : 'email'", depends_on=("customer_email", "customer_phone")),
                ),
                preconditions=("Customer identified",),
                postconditions=("Message sent", "Activity logged"),
            ),
            ProcessStepContext(
                domain=domain,
                step="send_portal_invite",
                name="Invite to Portal",
                description="Send a customer portal invitation",
                fields=(
                    *_customer_context(domain),
                    field("pending_invite", RECORD, "Unaccepted invitation, if any",
                          "portal_invites WHERE customer_id = ? AND accepted_at IS NULL",
                          kind=OBJECT, depends_on=("customer_id",)),
                    field("has_portal_access", DERIVED, "Whether the customer already has an account",
                          "customer_accounts.id IS NOT NULL", depends_on=("customer_id",)),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="view_messages",
                name="View Messages",
                description="Summarize unread conversations",
                fields=(
                    field("unread_conversations", AGGREGATE, "Conversations with unread messages",
                          "conversations WHERE unread_count > 0", required=True, kind=LIST,
                          depends_on=("business_id", "user_id")),
                ),
            ),
        ),
    )


def _site_assessment() -> DomainContext:
    domain = Domain.SITE_ASSESSMENT
    field = partial(_field, domain)
    return DomainContext(
        domain=domain,
        name="Site Assessment",
        description="Property visits before quoting",
        shared_fields=_business_context(domain),
        steps=(
            ProcessStepContext(
                domain=domain,
                step="schedule_assessment",
                name="Schedule Assessment",
                description="Book a site visit with an assessor",
                fields=(
                    *_customer_context(domain),
                    _available_slots(domain),
                    field("assessors", AGGREGATE, "Team members who perform assessments",
                          "business_members WHERE can_assess", kind=LIST, cache_seconds=300,
                          depends_on=("business_id",)),
                ),
                postconditions=("Assessment job scheduled",),
            ),
            ProcessStepContext(
                domain=domain,
                step="complete_assessment",
                name="Complete Assessment",
                description="Record findings from a visit",
                fields=(
                    *_job_context(domain),
                    field("assessment_checklist", RECORD, "Checklist attached to the assessment",
                          "job_checklists WHERE job_id = ?", kind=OBJECT, depends_on=("job_id",)),
                    field("assessment_photos", AGGREGATE, "Photos uploaded during the visit",
                          "job_media WHERE job_id = ?", kind=LIST, depends_on=("job_id",)),
                ),
            ),
        ),
    )


def _quoting() -> DomainContext:
    domain = Domain.QUOTING
    return DomainContext(
        domain=domain,
        name="Quoting",
        description="Drafting, sending and converting quotes",
        shared_fields=_business_context(domain),
        steps=(
            ProcessStepContext(
                domain=domain,
                step="create_quote",
                name="Create Quote",
                description="Draft a quote for a customer",
                fields=(*_customer_context(domain), _service_catalog(domain), _tax_rate(domain)),
            ),
            ProcessStepContext(
                domain=domain,
                step="send_quote",
                name="Send Quote",
                description="Send a drafted quote",
                fields=(*_customer_context(domain), *_quote_context(domain)),
                preconditions=("Quote is in draft",),
            ),
            ProcessStepContext(
                domain=domain,
                step="convert_quote_to_job",
                name="Convert Quote to Job",
                description="Create and schedule a job from an approved quote",
                fields=(*_customer_context(domain), *_quote_context(domain), _team_members(domain)),
                preconditions=("Quote is approved",),
                postconditions=("Job created from the quote",),
            ),
        ),
    )


def _job_management() -> DomainContext:
    domain = Domain.JOB_MANAGEMENT
    field = partial(_field, domain)
    return DomainContext(
        domain=domain,
        name="Job Management",
        description="Creating and tracking jobs",
        shared_fields=_business_context(domain),
        steps=(
            ProcessStepContext(
                domain=domain,
                step="create_job",
                name="Create Job",
                description="Create a job for a customer",
                fields=(*_customer_context(domain), _service_catalog(domain), _team_members(domain)),
            ),
            ProcessStepContext(
                domain=domain,
                step="update_job",
                name="Update Job",
                description="Change status or details of a job",
                fields=(
                    *_job_context(domain),
                    field("job_notes", AGGREGATE, "Notes on the job", "job_notes WHERE job_id = ?",
                          kind=LIST, depends_on=("job_id",)),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="assign_job",
                name="Assign Job",
                description="Put a team member on a job",
                fields=(
                    *_job_context(domain),
                    _team_members(domain, required=True),
                    field("member_availability", DERIVED, "Free members at the job's start",
                          "team_members minus members booked at job_starts_at",
                          kind=LIST, depends_on=("team_members", "job_starts_at")),
                ),
            ),
        ),
    )


def _scheduling() -> DomainContext:
    domain = Domain.SCHEDULING
    field = partial(_field, domain)
    scheduled_jobs = field(
        "scheduled_jobs", AGGREGATE, "Jobs on the calendar for the period",
        "jobs WHERE starts_at BETWEEN ? AND ?", required=True, kind=LIST, depends_on=("business_id",),
    )
    return DomainContext(
        domain=domain,
        name="Scheduling",
        description="Calendar, availability and routing",
        shared_fields=_business_context(domain),
        steps=(
            ProcessStepContext(
                domain=domain,
                step="view_calendar",
                name="View Calendar",
                description="Summarize the calendar",
                fields=(scheduled_jobs, _team_members(domain)),
            ),
            ProcessStepContext(
                domain=domain,
                step="schedule_job",
                name="Schedule Job",
                description="Place a job on the calendar",
                fields=(*_job_context(domain), _available_slots(domain), _team_members(domain)),
            ),
            ProcessStepContext(
                domain=domain,
                step="reschedule_job",
                name="Reschedule Job",
                description="Move a scheduled job",
                fields=(
                    *_job_context(domain),
                    _available_slots(domain),
                    field("conflicting_jobs", AGGREGATE, "Jobs overlapping the new slot",
                          "jobs WHERE assigned member overlaps", kind=LIST, depends_on=("job_starts_at",)),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="batch_schedule",
                name="Batch Schedule",
                description="Schedule every unscheduled job in a period",
                fields=(
                    field("unscheduled_jobs", AGGREGATE, "Jobs without a start time",
                          "jobs WHERE starts_at IS NULL", required=True, kind=LIST, depends_on=("business_id",)),
                    _available_slots(domain),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="optimize_route",
                name="Optimize Route",
                description="Order a day's visits for the shortest drive",
                fields=(
                    scheduled_jobs,
                    field("route_plan", EXTERNAL, "Drive times between visits",
                          "maps distance matrix", kind=LIST, cache_seconds=900,
                          depends_on=("scheduled_jobs",)),
                ),
            ),
        ),
    )


def _time_tracking() -> DomainContext:
    domain = Domain.TIME_TRACKING
    field = partial(_field, domain)
    active_entry = partial(
        field, "active_time_entry", RECORD, "Open time entry for the user",
        "time_entries WHERE user_id = ? AND clock_out IS NULL", kind=OBJECT, depends_on=("user_id",),
    )
    return DomainContext(
        domain=domain,
        name="Time Tracking",
        description="Clocking in and out and timesheets",
        shared_fields=_business_context(domain),
        steps=(
            ProcessStepContext(
                domain=domain,
                step="clock_in",
                name="Clock In",
                description="Start a time entry",
                fields=(
                    active_entry(),
                    field("todays_jobs", AGGREGATE, "The user's jobs today",
                          "jobs WHERE assigned to user_id AND starts_at today", kind=LIST,
                          depends_on=("user_id",)),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="clock_out",
                name="Clock Out",
                description="Close the open time entry",
                fields=(active_entry(required=True),),
            ),
            ProcessStepContext(
                domain=domain,
                step="view_timesheet",
                name="View Timesheet",
                description="Summarize hours worked",
                fields=(
                    field("timesheet_entries", AGGREGATE, "Time entries for the period",
                          "time_entries WHERE user_id = ? AND clock_in BETWEEN ? AND ?",
                          required=True, kind=LIST, depends_on=("user_id",)),
                    field("pay_period", DERIVED, "Current pay period", "business pay schedule"),
                ),
            ),
        ),
    )


def _invoicing() -> DomainContext:
    domain = Domain.INVOICING
    field = partial(_field, domain)
    return DomainContext(
        domain=domain,
        name="Invoicing",
        description="Creating, sending and voiding invoices",
        shared_fields=_business_context(domain),
        steps=(
            ProcessStepContext(
                domain=domain,
                step="create_invoice",
                name="Create Invoice",
                description="Bill a customer",
                fields=(
                    *_customer_context(domain),
                    field("billable_jobs", AGGREGATE, "Completed jobs not yet invoiced",
                          "jobs WHERE customer_id = ? AND status = 'completed' AND invoice_id IS NULL",
                          kind=LIST, depends_on=("customer_id",)),
                    _tax_rate(domain),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="send_invoice",
                name="Send Invoice",
                description="Send an invoice to the customer",
                fields=(*_customer_context(domain), *_invoice_context(domain)),
            ),
            ProcessStepContext(
                domain=domain,
                step="void_invoice",
                name="Void Invoice",
                description="Void an issued invoice",
                fields=(
                    *_invoice_context(domain),
                    field("invoice_payments", AGGREGATE, "Payments applied to the invoice",
                          "payments WHERE invoice_id = ?", kind=LIST, depends_on=("invoice_id",)),
                ),
                preconditions=("Invoice has no captured card payments",),
            ),
            ProcessStepContext(
                domain=domain,
                step="close_out_job",
                name="Close Out Job",
                description="Complete a job and bill it",
                fields=(
                    *_customer_context(domain),
                    *_job_context(domain),
                    field("job_line_items", AGGREGATE, "Billable items recorded on the job",
                          "job_line_items WHERE job_id = ?", kind=LIST, depends_on=("job_id",)),
                    _tax_rate(domain),
                ),
                postconditions=("Job completed", "Invoice sent"),
            ),
        ),
    )


def _payment_processing() -> DomainContext:
    domain = Domain.PAYMENT_PROCESSING
    field = partial(_field, domain)
    return DomainContext(
        domain=domain,
        name="Payment Processing",
        description="Recording, charging and refunding payments",
        shared_fields=_business_context(domain),
        steps=(
            ProcessStepContext(
                domain=domain,
                step="record_payment",
                name="Record Payment",
                description="Record money received",
                fields=(
                    *_customer_context(domain),
                    field("open_invoices", AGGREGATE, "Unpaid invoices for the customer",
                          "invoices WHERE customer_id = ? AND amount_due > 0",
                          kind=LIST, depends_on=("customer_id",)),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="process_card_payment",
                name="Charge Card",
                description="Charge the card on file for an invoice",
                fields=(
                    *_customer_context(domain),
                    *_invoice_context(domain),
                    field("card_on_file", EXTERNAL, "Saved card summary from the processor",
                          "payment processor customer", kind=OBJECT, depends_on=("customer_id",)),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="refund_payment",
                name="Refund Payment",
                description="Refund all or part of a payment",
                fields=(
                    *_customer_context(domain),
                    field("payment_id", RECORD, "Payment id", "payments.id", required=True),
                    field("payment_amount", RECORD, "Payment amount in cents", "payments.amount",
                          required=True, depends_on=("payment_id",)),
                    field("payment_method", RECORD, "How the payment was made", "payments.method",
                          depends_on=("payment_id",)),
                    field("payment_date", RECORD, "When the payment was received", "payments.received_at",
                          depends_on=("payment_id",)),
                ),
            ),
        ),
    )


def _recurring_billing() -> DomainContext:
    domain = Domain.RECURRING_BILLING
    field = partial(_field, domain)
    return DomainContext(
        domain=domain,
        name="Recurring Billing",
        description="Subscriptions and recurring plans",
        shared_fields=_business_context(domain),
        steps=(
            ProcessStepContext(
                domain=domain,
                step="create_recurring_plan",
                name="Create Recurring Plan",
                description="Set up a recurring service plan",
                fields=(*_customer_context(domain), _service_catalog(domain)),
            ),
            ProcessStepContext(
                domain=domain,
                step="manage_subscription",
                name="Manage Subscription",
                description="Pause, resume or cancel a subscription",
                fields=(
                    *_customer_context(domain),
                    field("subscription", RECORD, "Active subscription for the customer",
                          "subscriptions WHERE customer_id = ?", required=True, kind=OBJECT,
                          depends_on=("customer_id",)),
                    field("upcoming_invoices", AGGREGATE, "Invoices the plan will generate next",
                          "subscription schedule", kind=LIST, depends_on=("subscription",)),
                ),
            ),
        ),
    )


def _team_management() -> DomainContext:
    domain = Domain.TEAM_MANAGEMENT
    field = partial(_field, domain)
    return DomainContext(
        domain=domain,
        name="Team Management",
        description="Members, availability and time off",
        shared_fields=_business_context(domain),
        steps=(
            ProcessStepContext(
                domain=domain,
                step="invite_member",
                name="Invite Member",
                description="Invite someone to the team",
                fields=(
                    _team_members(domain, required=True),
                    field("seat_limit", RECORD, "Seats allowed by the plan", "subscriptions.seats",
                          cache_seconds=3600, depends_on=("business_id",)),
                    field("pending_invites", AGGREGATE, "Invitations not yet accepted",
                          "business_invites WHERE accepted_at IS NULL", kind=LIST,
                          depends_on=("business_id",)),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="manage_availability",
                name="Manage Availability",
                description="Change working hours",
                fields=(
                    _team_members(domain, required=True),
                    field("member_schedules", AGGREGATE, "Working hours per member",
                          "member_availability WHERE business_id = ?", kind=LIST,
                          depends_on=("team_members",)),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="review_time_off",
                name="Review Time Off",
                description="Approve or deny time-off requests",
                fields=(
                    field("pending_time_off", AGGREGATE, "Time-off requests awaiting review",
                          "time_off_requests WHERE status = 'pending'", required=True, kind=LIST,
                          depends_on=("business_id",)),
                    _team_members(domain),
                ),
            ),
            ProcessStepContext(
                domain=domain,
                step="view_utilization",
                name="View Utilization",
                description="Billed versus available hours",
                fields=(
                    _team_members(domain, required=True),
                    field("utilization_report", AGGREGATE, "Hours per member for the period",
                          "time_entries grouped by user_id", kind=LIST, depends_on=("team_members",)),
                ),
            ),
        ),
    )


def _checklists() -> DomainContext:
    domain = Domain.CHECKLISTS
    field = partial(_field, domain)
    templates = field(
        "checklist_templates", AGGREGATE, "Checklist templates for the business",
        "checklist_templates WHERE business_id = ?", kind=LIST, cache_seconds=300,
        depends_on=("business_id",),
    )
    return DomainContext(
        domain=domain,
        name="Checklists",
        description="Checklist templates and job checklists",
        shared_fields=_business_context(domain),
        steps=(
            ProcessStepContext(
                domain=domain,
                step="create_template",
                name="Create Template",
                description="Define a reusable checklist",
                fields=(templates,),
            ),
            ProcessStepContext(
                domain=domain,
                step="assign_checklist",
                name="Assign Checklist",
                description="Attach a checklist to a job",
                fields=(*_job_context(domain), templates),
            ),
            ProcessStepContext(
                domain=domain,
                step="complete_task",
                name="Complete Task",
                description="Tick off checklist items",
                fields=(
                    *_job_context(domain),
                    field("checklist_progress", RECORD, "Items done and remaining",
                          "job_checklist_items WHERE job_id = ?", required=True, kind=OBJECT,
                          depends_on=("job_id",)),
                ),
            ),
        ),
    )


DOMAIN_CONTEXTS: tuple[DomainContext, ...] = (
    _lead_generation(),
    _communication(),
    _site_assessment(),
    _quoting(),
    _job_management(),
    _scheduling(),
    _time_tracking(),
    _invoicing(),
    _payment_processing(),
    _recurring_billing(),
    _team_management(),
    _checklists(),
)
