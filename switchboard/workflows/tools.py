"""Capabilities exposed by the tool-execution layer.

Workflow steps and prompt templates may only name tools listed here; both
registries check this at load time.
"""

from types import MappingProxyType

TOOLS = MappingProxyType({
    # customers and leads
    "search_customer": "Find customers by name, email or phone",
    "create_customer": "Create a customer record",
    "update_customer": "Update contact details on a customer record",
    "get_customer_history": "List past jobs, quotes and payments for a customer",
    "import_customers": "Bulk import customers from an uploaded file",
    "score_lead": "Score a lead by data completeness and fit",
    "create_request": "Log a service request for a customer",
    "auto_assign_lead": "Assign a lead to the best available team member",
    # communication
    "get_conversation_history": "Fetch recent messages with a customer",
    "draft_message": "Draft a message for review",
    "send_message": "Send an SMS or in-app message to a customer",
    "send_email": "Send an email to a customer",
    "send_portal_invite": "Invite a customer to the customer portal",
    "log_activity": "Record an activity on the customer timeline",
    # assessments
    "create_assessment_job": "Create a job flagged as a site assessment",
    "complete_assessment": "Mark a site assessment as finished",
    "generate_assessment_report": "Write up the findings of an assessment",
    # quotes
    "get_quote": "Fetch a quote with its line items",
    "create_quote": "Draft a quote",
    "update_quote": "Change line items or pricing on a quote",
    "send_quote": "Send a quote to the customer",
    "approve_quote": "Mark a quote as accepted",
    "convert_quote_to_job": "Create a job from an approved quote",
    # jobs and scheduling
    "get_job": "Fetch a job with its visits and notes",
    "create_job": "Create a job",
    "update_job_status": "Move a job to another status",
    "add_job_note": "Attach a note to a job",
    "cancel_job": "Cancel a job",
    "assign_job": "Assign a team member to a job",
    "schedule_job": "Place a job on the calendar",
    "reschedule_job": "Move a scheduled job",
    "batch_schedule_jobs": "Schedule every unscheduled job in a period",
    "check_availability": "Find free slots on the team calendar",
    "optimize_route": "Order a day's visits for the shortest drive",
    "get_capacity": "Report booked versus available hours",
    "complete_job": "Mark a job as complete",
    "send_confirmation": "Send an appointment confirmation to the customer",
    "request_review": "Ask the customer for a review",
    # time tracking
    "clock_in": "Start the timer for a team member",
    "clock_out": "Stop the timer for a team member",
    "log_time": "Record hours worked",
    "get_timesheet": "List hours worked in a period",
    # billing
    "create_invoice": "Create an invoice",
    "send_invoice": "Send an invoice to the customer",
    "void_invoice": "Void an issued invoice",
    "send_payment_reminder": "Remind a customer about an unpaid balance",
    "record_payment": "Record a payment received",
    "charge_card": "Charge the card on file",
    "refund_payment": "Refund all or part of a payment",
    "create_recurring_plan": "Create a recurring billing plan",
    "update_subscription": "Pause, resume or cancel a subscription",
    # team and checklists
    "invite_team_member": "Invite someone to the team",
    "set_availability": "Change a team member's working hours",
    "create_time_off_request": "Request time off",
    "review_time_off": "Approve or deny time-off requests",
    "get_team_utilization": "Report billed versus available hours per person",
    "create_checklist_template": "Define a reusable checklist",
    "assign_checklist": "Attach a checklist to a job",
    "complete_checklist_item": "Tick off a checklist item",
    "get_checklist_progress": "Report checklist completion on a job",
})

TOOL_CATALOG: frozenset[str] = frozenset(TOOLS)
