"""Shipped prompt templates: one per domain, overrides for sensitive intents, one per workflow."""

from switchboard.prompts.fragments import (
    CONFIRMATION_CONSTRAINT,
    JSON_ACTION_OUTPUT,
    MONEY_CONSTRAINT,
    OUTBOUND_CONSTRAINT,
    REQUEST_CONTEXT,
    Persona,
    constraints,
    role,
)
from switchboard.prompts.models import PromptSections, PromptTemplate, TargetKind
from switchboard.taxonomy.enums import Domain, RiskLevel

BASE_KEYS = ("business_name", "user_name", "user_role")
REQUEST_KEYS = ("user_message", "intent_name", "entities")
WORKFLOW_KEYS = (
    "workflow_name",
    "step_order",
    "total_steps",
    "step_tool",
    "step_description",
    "step_args",
    "previous_results",
)

WORKFLOW_STEP_CONTEXT = (
    "Workflow: {{ workflow_name }}, step {{ step_order }} of {{ total_steps }}\n"
    "Tool: {{ step_tool }} ({{ step_description }})\n"
    "Arguments: {{ step_args | format_args }}\n"
    "{% if previous_results %}\n"
    "Completed steps:\n"
    "{% for previous in previous_results %}\n"
    "- {{ previous.order }}. {{ previous.tool }}: {{ previous.result | format_args }}\n"
    "{% endfor %}\n"
    "{% endif %}"
)

WORKFLOW_STEP_TASK = (
    "Carry out step {{ step_order }} only. Fill any argument shown as missing from the "
    "completed steps or ask the user for it."
)

WORKFLOW_STEP_OUTPUT = (
    "Reply with the single {{ step_tool }} call and its arguments, or one question for the user "
    "when an argument cannot be filled."
)


def _template(
    template_id: str,
    name: str,
    target_kind: TargetKind,
    target_id: str,
    domain: Domain,
    context_step: str,
    persona: Persona,
    *,
    context: str,
    task: str,
    keys: tuple[str, ...],
    tools: tuple[str, ...] = (),
    extra_constraints: tuple[str, ...] = (),
    output_format: str = JSON_ACTION_OUTPUT,
    risk_level: RiskLevel = RiskLevel.LOW,
    requires_confirmation: bool = False,
) -> PromptTemplate:
    if requires_confirmation:
        extra_constraints = (*extra_constraints, CONFIRMATION_CONSTRAINT)
    return PromptTemplate(
        id=template_id,
        name=name,
        target_kind=target_kind,
        target_id=target_id,
        domain=domain,
        context_step=context_step,
        sections=PromptSections(
            role=role(persona),
            context=context,
            task=task,
            constraints=constraints(persona, *extra_constraints),
            output_format=output_format,
        ),
        required_context_keys=keys,
        tools=tools,
        risk_level=risk_level,
        requires_confirmation=requires_confirmation,
    )


def _domain_template(domain: Domain, name: str, context_step: str, persona: Persona, **kwargs) -> PromptTemplate:
    return _template(
        f"domain.{domain.value}",
        name,
        TargetKind.DOMAIN,
        domain.value,
        domain,
        context_step,
        persona,
        **kwargs,
    )


def _intent_template(
    intent_id: str, name: str, domain: Domain, context_step: str, persona: Persona, **kwargs
) -> PromptTemplate:
    return _template(
        f"intent.{intent_id}",
        name,
        TargetKind.INTENT,
        intent_id,
        domain,
        context_step,
        persona,
        **kwargs,
    )


def _workflow_template(
    workflow_id: str, name: str, domain: Domain, context_step: str, persona: Persona, **kwargs
) -> PromptTemplate:
    return _template(
        f"workflow.{workflow_id}",
        name,
        TargetKind.WORKFLOW,
        workflow_id,
        domain,
        context_step,
        persona,
        task=WORKFLOW_STEP_TASK,
        output_format=WORKFLOW_STEP_OUTPUT,
        **kwargs,
    )


DOMAIN_TEMPLATES: tuple[PromptTemplate, ...] = (
    _domain_template(
        Domain.LEAD_GENERATION,
        "Lead Generation",
        "create_lead",
        Persona.SALES,
        context=REQUEST_CONTEXT + (
            "{% if existing_customers %}\n"
            "Existing customers ({{ existing_customers | length }}):\n"
            "{% for customer in existing_customers %}\n"
            "- {{ customer.name }}\n"
            "{% endfor %}\n"
            "{% endif %}\n"
            "{% if lead_sources %}\n"
            "Known lead sources: {{ lead_sources | join(', ') }}\n"
            "{% endif %}"
        ),
        task=(
            "Capture the lead described in the request. Check the existing customers for a "
            "duplicate first, then create the customer and log the request."
        ),
        keys=(*BASE_KEYS, *REQUEST_KEYS, "existing_customers", "lead_sources"),
        tools=("search_customer", "create_customer", "update_customer", "score_lead", "create_request",
               "auto_assign_lead", "import_customers", "get_customer_history"),
    ),
    _domain_template(
        Domain.COMMUNICATION,
        "Customer Communication",
        "contact_customer",
        Persona.CUSTOMER_SERVICE,
        context=REQUEST_CONTEXT + (
            "Customer: {{ customer_name }}\n"
            "{% if customer_email %}\n"
            "Email: {{ customer_email }}\n"
            "{% endif %}\n"
            "{% if customer_phone %}\n"
            "Phone: {{ customer_phone }}\n"
            "{% endif %}\n"
            "{% if preferred_channel %}\n"
            "Preferred channel: {{ preferred_channel }}\n"
            "{% endif %}\n"
            "{% if recent_messages %}\n"
            "Recent messages:\n"
            "{% for message in recent_messages %}\n"
            "- {{ message.direction }}: {{ message.body }}\n"
            "{% endfor %}\n"
            "{% endif %}"
        ),
        task="Draft the message the user asked for, in the tone of the recent conversation.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "customer_name", "customer_email", "customer_phone",
              "preferred_channel", "recent_messages"),
        tools=("get_conversation_history", "draft_message", "send_message", "send_email",
               "send_portal_invite", "log_activity"),
        requires_confirmation=True,
    ),
    _domain_template(
        Domain.SITE_ASSESSMENT,
        "Site Assessment",
        "schedule_assessment",
        Persona.SCHEDULER,
        context=REQUEST_CONTEXT + (
            "Customer: {{ customer_name }}\n"
            "{% if customer_address %}\n"
            "Property: {{ customer_address }}\n"
            "{% endif %}\n"
            "{% if scheduling_preferences %}\n"
            "Scheduling preferences: {{ scheduling_preferences | format_args }}\n"
            "{% endif %}\n"
            "{% if available_slots %}\n"
            "Open slots:\n"
            "{% for slot in available_slots %}\n"
            "- {{ slot.start }} to {{ slot.end }}\n"
            "{% endfor %}\n"
            "{% endif %}\n"
            "{% if assessors %}\n"
            "Assessors: {{ assessors | map(attribute='name') | join(', ') }}\n"
            "{% endif %}"
        ),
        task="Book the site assessment in an open slot that fits the customer's preferences.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "customer_name", "customer_address", "scheduling_preferences",
              "available_slots", "assessors"),
        tools=("search_customer", "create_customer", "create_request", "check_availability",
               "create_assessment_job", "assign_job", "send_confirmation", "complete_assessment",
               "generate_assessment_report"),
        requires_confirmation=True,
    ),
    _domain_template(
        Domain.QUOTING,
        "Quoting",
        "create_quote",
        Persona.SALES,
        context=REQUEST_CONTEXT + (
            "Customer: {{ customer_name }}\n"
            "{% if customer_address %}\n"
            "Property: {{ customer_address }}\n"
            "{% endif %}\n"
            "{% if service_catalog %}\n"
            "Service catalog:\n"
            "{% for service in service_catalog %}\n"
            "- {{ service.name }}: {{ service.price | money }}\n"
            "{% endfor %}\n"
            "{% endif %}\n"
            "{% if tax_rate_default %}\n"
            "Default tax rate: {{ tax_rate_default }}%\n"
            "{% endif %}"
        ),
        task="Prepare the quote the user described using catalog services and prices.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "customer_name", "customer_address", "service_catalog",
              "tax_rate_default"),
        tools=("search_customer", "get_customer_history", "create_quote", "get_quote", "update_quote",
               "send_quote", "approve_quote", "convert_quote_to_job"),
        extra_constraints=(MONEY_CONSTRAINT,),
    ),
    _domain_template(
        Domain.JOB_MANAGEMENT,
        "Job Management",
        "update_job",
        Persona.OPERATIONS,
        context=REQUEST_CONTEXT + (
            "Job: {{ job_title or job_id }} ({{ job_status }})\n"
            "{% if job_address %}\n"
            "Address: {{ job_address }}\n"
            "{% endif %}\n"
            "{% if job_starts_at %}\n"
            "Scheduled: {{ job_starts_at }}\n"
            "{% endif %}\n"
            "{% if assigned_members %}\n"
            "Crew: {{ assigned_members | map(attribute='name') | join(', ') }}\n"
            "{% endif %}\n"
            "{% if job_notes %}\n"
            "Notes:\n"
            "{% for note in job_notes %}\n"
            "- {{ note.body }}\n"
            "{% endfor %}\n"
            "{% endif %}"
        ),
        task="Make the change to the job the user asked for.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "job_id", "job_title", "job_status", "job_address",
              "job_starts_at", "assigned_members", "job_notes"),
        tools=("get_job", "create_job", "update_job_status", "add_job_note", "assign_job", "cancel_job"),
    ),
    _domain_template(
        Domain.SCHEDULING,
        "Scheduling",
        "schedule_job",
        Persona.SCHEDULER,
        context=REQUEST_CONTEXT + (
            "Job: {{ job_title or job_id }} ({{ job_status }})\n"
            "{% if job_starts_at %}\n"
            "Currently scheduled: {{ job_starts_at }}\n"
            "{% endif %}\n"
            "{% if available_slots %}\n"
            "Open slots:\n"
            "{% for slot in available_slots %}\n"
            "- {{ slot.start }} to {{ slot.end }}\n"
            "{% endfor %}\n"
            "{% endif %}\n"
            "{% if team_members %}\n"
            "Team: {{ team_members | map(attribute='name') | join(', ') }}\n"
            "{% endif %}"
        ),
        task="Place the job on the calendar in an open slot.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "job_id", "job_title", "job_status", "job_starts_at",
              "available_slots", "team_members"),
        tools=("check_availability", "schedule_job", "reschedule_job", "batch_schedule_jobs",
               "assign_job", "send_confirmation", "get_capacity", "optimize_route"),
        requires_confirmation=True,
    ),
    _domain_template(
        Domain.TIME_TRACKING,
        "Time Tracking",
        "view_timesheet",
        Persona.PEOPLE,
        context=REQUEST_CONTEXT + (
            "{% if pay_period %}\n"
            "Pay period: {{ pay_period }}\n"
            "{% endif %}\n"
            "{% if business_timezone %}\n"
            "Timezone: {{ business_timezone }}\n"
            "{% endif %}\n"
            "Time entries:\n"
            "{% for entry in timesheet_entries %}\n"
            "- {{ entry.date }}: {{ entry.hours }}h\n"
            "{% else %}\n"
            "- none recorded\n"
            "{% endfor %}"
        ),
        task="Answer the user's question about hours worked, or record the time they describe.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "timesheet_entries", "pay_period", "business_timezone"),
        tools=("clock_in", "clock_out", "log_time", "get_timesheet"),
    ),
    _domain_template(
        Domain.INVOICING,
        "Invoicing",
        "create_invoice",
        Persona.FINANCE,
        context=REQUEST_CONTEXT + (
            "Customer: {{ customer_name }}\n"
            "{% if customer_email %}\n"
            "Billing email: {{ customer_email }}\n"
            "{% endif %}\n"
            "{% if billable_jobs %}\n"
            "Completed jobs not yet invoiced:\n"
            "{% for job in billable_jobs %}\n"
            "- {{ job.title }}: {{ job.total | money }}\n"
            "{% endfor %}\n"
            "{% endif %}\n"
            "{% if tax_rate_default %}\n"
            "Default tax rate: {{ tax_rate_default }}%\n"
            "{% endif %}"
        ),
        task="Prepare the invoice the user asked for from the customer's billable work.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "customer_name", "customer_email", "billable_jobs",
              "tax_rate_default"),
        tools=("create_invoice", "send_invoice", "send_payment_reminder", "void_invoice"),
        risk_level=RiskLevel.MEDIUM,
        requires_confirmation=True,
    ),
    _domain_template(
        Domain.PAYMENT_PROCESSING,
        "Payment Processing",
        "record_payment",
        Persona.FINANCE,
        context=REQUEST_CONTEXT + (
            "Customer: {{ customer_name }}\n"
            "{% if open_invoices %}\n"
            "Open invoices:\n"
            "{% for invoice in open_invoices %}\n"
            "- {{ invoice.number }}: {{ invoice.amount_due | money }} due\n"
            "{% endfor %}\n"
            "{% endif %}"
        ),
        task="Apply the payment the user described to the right invoice.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "customer_name", "open_invoices"),
        tools=("record_payment", "charge_card", "refund_payment"),
        risk_level=RiskLevel.HIGH,
        requires_confirmation=True,
    ),
    _domain_template(
        Domain.RECURRING_BILLING,
        "Recurring Billing",
        "manage_subscription",
        Persona.FINANCE,
        context=REQUEST_CONTEXT + (
            "Customer: {{ customer_name }}\n"
            "Subscription: {{ subscription | format_args }}\n"
            "{% if upcoming_invoices %}\n"
            "Upcoming invoices:\n"
            "{% for invoice in upcoming_invoices %}\n"
            "- {{ invoice.due_date }}: {{ invoice.total | money }}\n"
            "{% endfor %}\n"
            "{% endif %}"
        ),
        task="Make the change to the subscription the user asked for.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "customer_name", "subscription", "upcoming_invoices"),
        tools=("create_recurring_plan", "update_subscription"),
        risk_level=RiskLevel.MEDIUM,
        requires_confirmation=True,
    ),
    _domain_template(
        Domain.TEAM_MANAGEMENT,
        "Team Management",
        "manage_availability",
        Persona.PEOPLE,
        context=REQUEST_CONTEXT + (
            "Team:\n"
            "{% for member in team_members %}\n"
            "- {{ member.name }} ({{ member.role }})\n"
            "{% endfor %}\n"
            "{% if member_schedules %}\n"
            "Working hours:\n"
            "{% for schedule in member_schedules %}\n"
            "- {{ schedule.name }}: {{ schedule.hours }}\n"
            "{% endfor %}\n"
            "{% endif %}"
        ),
        task="Handle the team request the user described.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "team_members", "member_schedules"),
        tools=("invite_team_member", "set_availability", "create_time_off_request", "review_time_off",
               "get_team_utilization"),
    ),
    _domain_template(
        Domain.CHECKLISTS,
        "Checklists",
        "assign_checklist",
        Persona.OPERATIONS,
        context=REQUEST_CONTEXT + (
            "Job: {{ job_title or job_id }} ({{ job_status }})\n"
            "{% if checklist_templates %}\n"
            "Checklist templates: {{ checklist_templates | map(attribute='name') | join(', ') }}\n"
            "{% endif %}"
        ),
        task="Handle the checklist request the user described.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "job_id", "job_title", "job_status", "checklist_templates"),
        tools=("create_checklist_template", "assign_checklist", "complete_checklist_item",
               "get_checklist_progress"),
    ),
)

INTENT_TEMPLATES: tuple[PromptTemplate, ...] = (
    _intent_template(
        "import_customers",
        "Import Customers",
        Domain.LEAD_GENERATION,
        "import_customers",
        Persona.SALES,
        context=REQUEST_CONTEXT + (
            "File columns: {{ import_columns | join(', ') }}\n"
            "{% if existing_customers %}\n"
            "Existing customers: {{ existing_customers | length }}\n"
            "{% endif %}"
        ),
        task="Map the file columns onto customer fields and flag rows that duplicate existing customers.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "import_columns", "existing_customers"),
        tools=("import_customers",),
        risk_level=RiskLevel.MEDIUM,
        requires_confirmation=True,
    ),
    _intent_template(
        "send_portal_invite",
        "Send Portal Invite",
        Domain.COMMUNICATION,
        "send_portal_invite",
        Persona.CUSTOMER_SERVICE,
        context=REQUEST_CONTEXT + (
            "Customer: {{ customer_name }}\n"
            "Email: {{ customer_email or 'none on file' }}\n"
            "{% if has_portal_access %}\n"
            "The customer already has portal access.\n"
            "{% elif pending_invite %}\n"
            "An invitation was already sent: {{ pending_invite | format_args }}\n"
            "{% endif %}"
        ),
        task="Invite the customer to the portal unless they already have access.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "customer_name", "customer_email", "has_portal_access",
              "pending_invite"),
        tools=("send_portal_invite",),
        requires_confirmation=True,
    ),
    _intent_template(
        "send_quote",
        "Send Quote",
        Domain.QUOTING,
        "send_quote",
        Persona.SALES,
        context=REQUEST_CONTEXT + (
            "Customer: {{ customer_name }} ({{ customer_email or 'no email on file' }})\n"
            "Quote {{ quote_number }} ({{ quote_status }}), total {{ quote_total | money }}\n"
            "{% if quote_line_items %}\n"
            "Line items:\n"
            "{% for item in quote_line_items %}\n"
            "- {{ item.description }}: {{ item.total | money }}\n"
            "{% endfor %}\n"
            "{% endif %}"
        ),
        task="Send the quote to the customer with a short cover note.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "customer_name", "customer_email", "quote_number",
              "quote_status", "quote_total", "quote_line_items"),
        tools=("get_quote", "send_quote"),
        extra_constraints=(MONEY_CONSTRAINT, OUTBOUND_CONSTRAINT),
        risk_level=RiskLevel.MEDIUM,
        requires_confirmation=True,
    ),
    _intent_template(
        "assign_job",
        "Assign Job",
        Domain.JOB_MANAGEMENT,
        "assign_job",
        Persona.OPERATIONS,
        context=REQUEST_CONTEXT + (
            "Job: {{ job_title or job_id }}\n"
            "{% if job_starts_at %}\n"
            "Scheduled: {{ job_starts_at }}\n"
            "{% endif %}\n"
            "{% if assigned_members %}\n"
            "Currently assigned: {{ assigned_members | map(attribute='name') | join(', ') }}\n"
            "{% endif %}\n"
            "Team: {{ team_members | map(attribute='name') | join(', ') }}\n"
            "{% if member_availability %}\n"
            "Free at that time: {{ member_availability | map(attribute='name') | join(', ') }}\n"
            "{% endif %}"
        ),
        task="Assign the team member the user named, warning if they are not free.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "job_id", "job_title", "job_starts_at", "assigned_members",
              "team_members", "member_availability"),
        tools=("assign_job",),
    ),
    _intent_template(
        "reschedule_job",
        "Reschedule Job",
        Domain.SCHEDULING,
        "reschedule_job",
        Persona.SCHEDULER,
        context=REQUEST_CONTEXT + (
            "Job: {{ job_title or job_id }}, currently {{ job_starts_at or 'unscheduled' }}\n"
            "{% if conflicting_jobs %}\n"
            "Conflicts at the requested time:\n"
            "{% for job in conflicting_jobs %}\n"
            "- {{ job.title }} at {{ job.starts_at }}\n"
            "{% endfor %}\n"
            "{% endif %}\n"
            "{% if available_slots %}\n"
            "Open slots:\n"
            "{% for slot in available_slots %}\n"
            "- {{ slot.start }} to {{ slot.end }}\n"
            "{% endfor %}\n"
            "{% endif %}"
        ),
        task="Move the job to the requested time, or propose the nearest open slot on a conflict.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "job_id", "job_title", "job_starts_at", "conflicting_jobs",
              "available_slots"),
        tools=("check_availability", "reschedule_job", "send_confirmation"),
        requires_confirmation=True,
    ),
    _intent_template(
        "optimize_route",
        "Optimize Route",
        Domain.SCHEDULING,
        "optimize_route",
        Persona.SCHEDULER,
        context=REQUEST_CONTEXT + (
            "Visits:\n"
            "{% for job in scheduled_jobs %}\n"
            "- {{ job.starts_at }} {{ job.title }} at {{ job.address }}\n"
            "{% endfor %}\n"
            "{% if route_plan %}\n"
            "Drive times:\n"
            "{% for leg in route_plan %}\n"
            "- {{ leg.origin }} to {{ leg.destination }}: {{ leg.minutes }} min\n"
            "{% endfor %}\n"
            "{% endif %}"
        ),
        task="Reorder the visits to minimize driving without moving any fixed appointment.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "scheduled_jobs", "route_plan"),
        tools=("optimize_route", "reschedule_job"),
    ),
    _intent_template(
        "void_invoice",
        "Void Invoice",
        Domain.INVOICING,
        "void_invoice",
        Persona.FINANCE,
        context=REQUEST_CONTEXT + (
            "Invoice {{ invoice_number }} ({{ invoice_status }}), total {{ invoice_total | money }}, "
            "{{ amount_due | money }} due\n"
            "{% if invoice_payments %}\n"
            "Payments applied:\n"
            "{% for payment in invoice_payments %}\n"
            "- {{ payment.amount | money }} by {{ payment.method }}\n"
            "{% endfor %}\n"
            "{% endif %}"
        ),
        task="Void the invoice. If payments were applied, explain that they must be refunded first.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "invoice_number", "invoice_status", "invoice_total",
              "amount_due", "invoice_payments"),
        tools=("void_invoice",),
        risk_level=RiskLevel.HIGH,
        requires_confirmation=True,
    ),
    _intent_template(
        "refund_payment",
        "Refund Payment",
        Domain.PAYMENT_PROCESSING,
        "refund_payment",
        Persona.FINANCE,
        context=REQUEST_CONTEXT + (
            "Customer: {{ customer_name }}\n"
            "Payment {{ payment_id }}: {{ payment_amount | money }}"
            "{% if payment_method %} by {{ payment_method }}{% endif %}"
            "{% if payment_date %} on {{ payment_date }}{% endif %}\n"
        ),
        task="Refund the amount the user named, never more than the original payment.",
        keys=(*BASE_KEYS, *REQUEST_KEYS, "customer_name", "payment_id", "payment_amount",
              "payment_method", "payment_date"),
        tools=("refund_payment",),
        risk_level=RiskLevel.HIGH,
        requires_confirmation=True,
    ),
)

WORKFLOW_TEMPLATES: tuple[PromptTemplate, ...] = (
    _workflow_template(
        "complete_lead_generation",
        "Lead Generation Workflow",
        Domain.LEAD_GENERATION,
        "create_lead",
        Persona.SALES,
        context=WORKFLOW_STEP_CONTEXT + (
            "{% if existing_customers %}\n"
            "Existing customers: {{ existing_customers | length }}\n"
            "{% endif %}"
        ),
        keys=(*BASE_KEYS, *WORKFLOW_KEYS, "existing_customers"),
    ),
    _workflow_template(
        "complete_customer_communication",
        "Customer Communication Workflow",
        Domain.COMMUNICATION,
        "contact_customer",
        Persona.CUSTOMER_SERVICE,
        context=WORKFLOW_STEP_CONTEXT + (
            "Customer: {{ customer_name }}\n"
            "{% if preferred_channel %}\n"
            "Preferred channel: {{ preferred_channel }}\n"
            "{% endif %}"
        ),
        keys=(*BASE_KEYS, *WORKFLOW_KEYS, "customer_name", "preferred_channel"),
        requires_confirmation=True,
    ),
    _workflow_template(
        "complete_site_assessment",
        "Site Assessment Workflow",
        Domain.SITE_ASSESSMENT,
        "schedule_assessment",
        Persona.SCHEDULER,
        context=WORKFLOW_STEP_CONTEXT + (
            "Customer: {{ customer_name }}\n"
            "{% if customer_address %}\n"
            "Property: {{ customer_address }}\n"
            "{% endif %}\n"
            "{% if available_slots %}\n"
            "Open slots:\n"
            "{% for slot in available_slots %}\n"
            "- {{ slot.start }} to {{ slot.end }}\n"
            "{% endfor %}\n"
            "{% endif %}"
        ),
        keys=(*BASE_KEYS, *WORKFLOW_KEYS, "customer_name", "customer_address", "available_slots"),
        requires_confirmation=True,
    ),
    _workflow_template(
        "quote_to_job",
        "Quote to Job Workflow",
        Domain.QUOTING,
        "convert_quote_to_job",
        Persona.OPERATIONS,
        context=WORKFLOW_STEP_CONTEXT + (
            "Customer: {{ customer_name }}\n"
            "Quote {{ quote_number }}, total {{ quote_total | money }}\n"
            "{% if team_members %}\n"
            "Team: {{ team_members | map(attribute='name') | join(', ') }}\n"
            "{% endif %}"
        ),
        keys=(*BASE_KEYS, *WORKFLOW_KEYS, "customer_name", "quote_number", "quote_total", "team_members"),
        extra_constraints=(MONEY_CONSTRAINT,),
        risk_level=RiskLevel.MEDIUM,
        requires_confirmation=True,
    ),
    _workflow_template(
        "job_to_invoice",
        "Job to Invoice Workflow",
        Domain.INVOICING,
        "close_out_job",
        Persona.FINANCE,
        context=WORKFLOW_STEP_CONTEXT + (
            "Customer: {{ customer_name }}\n"
            "Job: {{ job_title or job_id }}\n"
            "{% if job_line_items %}\n"
            "Billable items:\n"
            "{% for item in job_line_items %}\n"
            "- {{ item.description }}: {{ item.total | money }}\n"
            "{% endfor %}\n"
            "{% endif %}\n"
            "{% if tax_rate_default %}\n"
            "Default tax rate: {{ tax_rate_default }}%\n"
            "{% endif %}"
        ),
        keys=(*BASE_KEYS, *WORKFLOW_KEYS, "customer_name", "job_id", "job_title", "job_line_items",
              "tax_rate_default"),
        risk_level=RiskLevel.MEDIUM,
        requires_confirmation=True,
    ),
)

PROMPT_TEMPLATES: tuple[PromptTemplate, ...] = (*DOMAIN_TEMPLATES, *INTENT_TEMPLATES, *WORKFLOW_TEMPLATES)
