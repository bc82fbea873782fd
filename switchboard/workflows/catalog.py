"""Shipped multi-step workflows."""

from switchboard.taxonomy.enums import Domain
from switchboard.workflows.models import (
    MultiStepWorkflow,
    OrderedStep,
    SpecialCardType,
    WorkflowCategory,
)

_CUSTOMER_ID = "results.customer.id or results.existing_customer.id"

COMPLETE_LEAD_GENERATION = MultiStepWorkflow(
    id="complete_lead_generation",
    name="Complete Lead Generation",
    description="Capture a lead, qualify it and make first contact",
    domain=Domain.LEAD_GENERATION,
    category=WorkflowCategory.PRE_SERVICE,
    special_card_type=SpecialCardType.LEAD_WORKFLOW,
    estimated_duration_ms=5000,
    steps=(
        OrderedStep(
            order=1,
            tool="search_customer",
            description="Check for an existing customer to avoid duplicates",
            args_template={"email": "input.email", "phone": "input.phone", "name": "input.name"},
            output_key="existing_customer",
        ),
        OrderedStep(
            order=2,
            tool="create_customer",
            description="Create the customer record when no duplicate was found",
            args_template={
                "name": "input.name",
                "email": "input.email",
                "phone": "input.phone",
                "address": "input.address",
                "lead_source": "input.lead_source",
                "notes": "input.note",
            },
            output_key="customer",
            skip_if="results.existing_customer.found",
        ),
        OrderedStep(
            order=3,
            tool="score_lead",
            description="Score the lead by data completeness",
            args_template={"customer_id": _CUSTOMER_ID},
            output_key="lead_score",
        ),
        OrderedStep(
            order=4,
            tool="create_request",
            description="Log the initial service request",
            args_template={
                "customer_id": _CUSTOMER_ID,
                "title": "input.request_title or 'New lead'",
                "description": "input.request_description or input.note",
            },
            output_key="request",
            optional=True,
        ),
        OrderedStep(
            order=5,
            tool="check_availability",
            description="See which team members can take the lead",
            args_template={"business_id": "context.business_id"},
            output_key="available_team",
        ),
        OrderedStep(
            order=6,
            tool="auto_assign_lead",
            description="Assign the lead to the best available team member",
            args_template={
                "request_id": "results.request.id",
                "available_members": "results.available_team.members",
            },
            output_key="assignment",
            skip_if="not results.request.id",
        ),
        OrderedStep(
            order=7,
            tool="send_email",
            description="Send a welcome email to the new lead",
            args_template={"customer_id": _CUSTOMER_ID, "template": "'welcome'"},
            output_key="welcome_email",
            optional=True,
            retry_on_fail=True,
        ),
    ),
    preconditions=(
        "Input contains a name and an email or phone number",
    ),
    postconditions=(
        "Customer record exists with a lead score",
        "A created request has an assignee",
    ),
    success_metrics=(
        "customer_created",
        "lead_scored",
        "request_created",
        "lead_assigned",
        "welcome_email_sent",
    ),
)

COMPLETE_CUSTOMER_COMMUNICATION = MultiStepWorkflow(
    id="complete_customer_communication",
    name="Customer Communication",
    description="Find the customer, draft a message in context, send it and log it",
    domain=Domain.COMMUNICATION,
    category=WorkflowCategory.OPERATIONS,
    special_card_type=SpecialCardType.COMMUNICATION_WORKFLOW,
    estimated_duration_ms=4000,
    steps=(
        OrderedStep(
            order=1,
            tool="search_customer",
            description="Identify the customer being contacted",
            args_template={
                "name": "input.name",
                "email": "input.email",
                "phone": "input.phone",
                "customer_id": "input.customer_id or context.customer_id",
            },
            output_key="customer",
        ),
        OrderedStep(
            order=2,
            tool="get_conversation_history",
            description="Load recent messages for context",
            args_template={"customer_id": "results.customer.id", "limit": "20"},
            output_key="history",
            optional=True,
        ),
        OrderedStep(
            order=3,
            tool="draft_message",
            description="Draft the message for review",
            args_template={
                "customer_id": "results.customer.id",
                "topic": "input.topic or input.note",
                "history": "results.history.messages",
            },
            output_key="draft",
        ),
        OrderedStep(
            order=4,
            tool="send_message",
            description="Send the approved message on the preferred channel",
            args_template={
                "customer_id": "results.customer.id",
                "channel": "input.channel or results.customer.preferred_channel or 'sms'",
                "body": "results.draft.body",
            },
            output_key="sent_message",
            retry_on_fail=True,
        ),
        OrderedStep(
            order=5,
            tool="log_activity",
            description="Record the message on the customer timeline",
            args_template={
                "customer_id": "results.customer.id",
                "activity_type": "'message_sent'",
                "reference_id": "results.sent_message.id",
            },
            output_key="activity",
            optional=True,
        ),
    ),
    preconditions=(
        "The customer can be identified by name, email, phone or id",
    ),
    postconditions=(
        "Message delivered on the chosen channel",
        "Activity logged on the customer timeline",
    ),
    success_metrics=(
        "customer_identified",
        "message_drafted",
        "message_sent",
        "activity_logged",
    ),
)

COMPLETE_SITE_ASSESSMENT = MultiStepWorkflow(
    id="complete_site_assessment",
    name="Complete Site Assessment",
    description="From assessment request to a scheduled, assigned and confirmed visit",
    domain=Domain.SITE_ASSESSMENT,
    category=WorkflowCategory.PRE_SERVICE,
    special_card_type=SpecialCardType.ASSESSMENT_WORKFLOW,
    estimated_duration_ms=15000,
    steps=(
        OrderedStep(
            order=1,
            tool="search_customer",
            description="Check for an existing customer record",
            args_template={"email": "input.email", "phone": "input.phone", "name": "input.name"},
            output_key="existing_customer",
        ),
        OrderedStep(
            order=2,
            tool="create_customer",
            description="Create the customer if not found",
            args_template={
                "name": "input.name",
                "email": "input.email",
                "phone": "input.phone",
                "address": "input.address",
            },
            output_key="customer",
            skip_if="results.existing_customer.found",
        ),
        OrderedStep(
            order=3,
            tool="create_request",
            description="Log the assessment request",
            args_template={
                "customer_id": _CUSTOMER_ID,
                "title": "input.request_title or 'Site Assessment'",
                "description": "input.request_description or input.note",
            },
            output_key="request",
            optional=True,
        ),
        OrderedStep(
            order=4,
            tool="check_availability",
            description="Check assessor availability",
            args_template={
                "business_id": "context.business_id",
                "preferred_date": "input.preferred_date or input.date",
            },
            output_key="availability",
        ),
        OrderedStep(
            order=5,
            tool="create_assessment_job",
            description="Create the assessment job on the calendar",
            args_template={
                "customer_id": _CUSTOMER_ID,
                "request_id": "results.request.id",
                "address": "input.address",
                "starts_at": "input.starts_at or results.availability.first_slot",
                "title": "input.title or 'Site Assessment'",
                "notes": "input.access_instructions",
            },
            output_key="assessment_job",
        ),
        OrderedStep(
            order=6,
            tool="assign_job",
            description="Assign an assessor to the job",
            args_template={
                "job_id": "results.assessment_job.id",
                "user_id": "input.assigned_to or results.availability.best_match",
            },
            output_key="assignment",
            optional=True,
        ),
        OrderedStep(
            order=7,
            tool="send_confirmation",
            description="Confirm the visit with the customer",
            args_template={"job_id": "results.assessment_job.id", "customer_id": _CUSTOMER_ID},
            output_key="confirmation",
            optional=True,
            retry_on_fail=True,
        ),
    ),
    preconditions=(
        "Input identifies the customer by name, email or phone",
        "An address is known for the property",
        "A preferred date or time is given",
    ),
    postconditions=(
        "Assessment job exists and is scheduled",
        "Customer has been notified when contact details exist",
    ),
    success_metrics=(
        "customer_identified",
        "request_logged",
        "assessment_scheduled",
        "assessor_assigned",
        "customer_notified",
    ),
)

QUOTE_TO_JOB = MultiStepWorkflow(
    id="quote_to_job",
    name="Quote to Job",
    description="Turn an approved quote into a scheduled, staffed job",
    domain=Domain.QUOTING,
    category=WorkflowCategory.SERVICE_DELIVERY,
    estimated_duration_ms=6000,
    steps=(
        OrderedStep(
            order=1,
            tool="get_quote",
            description="Load the approved quote",
            args_template={"quote_id": "input.quote_id"},
            output_key="quote",
        ),
        OrderedStep(
            order=2,
            tool="create_job",
            description="Create a job from the quote's line items",
            args_template={
                "quote_id": "results.quote.id",
                "customer_id": "results.quote.customer_id",
                "title": "results.quote.title",
            },
            output_key="job",
        ),
        OrderedStep(
            order=3,
            tool="schedule_job",
            description="Place the job on the calendar",
            args_template={
                "job_id": "results.job.id",
                "starts_at": "input.starts_at or input.date",
            },
            output_key="scheduled_job",
        ),
        OrderedStep(
            order=4,
            tool="assign_job",
            description="Assign the crew",
            args_template={"job_id": "results.job.id", "user_id": "input.assigned_to"},
            output_key="assignment",
            optional=True,
        ),
        OrderedStep(
            order=5,
            tool="send_confirmation",
            description="Confirm the booking with the customer",
            args_template={"job_id": "results.job.id", "customer_id": "results.quote.customer_id"},
            output_key="confirmation",
            optional=True,
            retry_on_fail=True,
        ),
    ),
    preconditions=(
        "Quote exists and is approved",
    ),
    postconditions=(
        "Job exists linked to the quote",
        "Job is scheduled",
    ),
    success_metrics=(
        "job_created",
        "job_scheduled",
        "crew_assigned",
        "customer_notified",
    ),
)

JOB_TO_INVOICE = MultiStepWorkflow(
    id="job_to_invoice",
    name="Job to Invoice",
    description="Close a finished job, bill it and ask for a review",
    domain=Domain.INVOICING,
    category=WorkflowCategory.POST_SERVICE,
    estimated_duration_ms=5000,
    steps=(
        OrderedStep(
            order=1,
            tool="complete_job",
            description="Mark the job complete",
            args_template={"job_id": "input.job_id"},
            output_key="completed_job",
        ),
        OrderedStep(
            order=2,
            tool="create_invoice",
            description="Create an invoice from the job's billable items",
            args_template={
                "job_id": "results.completed_job.id",
                "customer_id": "results.completed_job.customer_id",
            },
            output_key="invoice",
        ),
        OrderedStep(
            order=3,
            tool="send_invoice",
            description="Send the invoice to the customer",
            args_template={"invoice_id": "results.invoice.id"},
            output_key="sent_invoice",
            retry_on_fail=True,
        ),
        OrderedStep(
            order=4,
            tool="request_review",
            description="Ask the customer for a review",
            args_template={
                "customer_id": "results.completed_job.customer_id",
                "job_id": "results.completed_job.id",
            },
            output_key="review_request",
            optional=True,
        ),
    ),
    preconditions=(
        "Job exists and its work is finished",
    ),
    postconditions=(
        "Job is complete",
        "Invoice sent to the customer",
    ),
    success_metrics=(
        "job_completed",
        "invoice_created",
        "invoice_sent",
        "review_requested",
    ),
)

WORKFLOWS: tuple[MultiStepWorkflow, ...] = (
    COMPLETE_LEAD_GENERATION,
    COMPLETE_CUSTOMER_COMMUNICATION,
    COMPLETE_SITE_ASSESSMENT,
    QUOTE_TO_JOB,
    JOB_TO_INVOICE,
)
