"""Trigger phrases for single intents.

One pattern set per intent, named after the intent. Regexes are matched
case-insensitively. Each set's examples must match it and no other set in
this pool; the registry checks that at load time.
"""

from switchboard.patterns.models import PatternDefinition, PatternPool
from switchboard.taxonomy.enums import Domain

D = Domain


def _intent_patterns(
    intent_id: str,
    domain: Domain,
    patterns: tuple[str, ...],
    examples: tuple[str, ...],
    keywords: tuple[str, ...] = (),
) -> PatternDefinition:
    return PatternDefinition(
        id=intent_id,
        pool=PatternPool.INTENT,
        target_id=intent_id,
        domain=domain,
        trigger_patterns=patterns,
        keywords=keywords,
        examples=examples,
    )


_LEADS = (
    _intent_patterns(
        "create_lead", D.LEAD_GENERATION,
        (
            r"\bnew\s+(?:lead|prospect|customer|client)\b",
            r"\b(?:add|create|capture|log|register|enter)\s+(?:a\s+)?(?:new\s+)?(?:lead|prospect|customer|client)\b",
        ),
        (
            "new lead from John Smith, 555-0100",
            "add a new customer named Maria Lopez",
            "create a lead for Dana Whitfield",
        ),
        keywords=("lead", "prospect"),
    ),
    _intent_patterns(
        "search_customer", D.LEAD_GENERATION,
        (
            r"\b(?:find|search\s+for|look\s+up|lookup|pull\s+up)\s+(?:the\s+)?(?:customer|client|contact)\b",
            r"\bsearch\s+(?:the\s+)?(?:customers|clients)\b",
        ),
        (
            "find customer John Smith",
            "look up the client with jane@example.com",
        ),
    ),
    _intent_patterns(
        "update_customer", D.LEAD_GENERATION,
        (
            r"\b(?:update|change|edit)\s+(?:the\s+)?(?:customer|client)(?:'s)?\s+(?:details|info|information|record|address|phone|email)\b",
        ),
        (
            "update the customer's phone for Ray Burns to 555-201-3344",
            "change the client address for Olivia Park",
        ),
    ),
    _intent_patterns(
        "view_customer_history", D.LEAD_GENERATION,
        (
            r"\bcustomer\s+history\b",
            r"\bhistory\s+for\s+(?:the\s+)?(?:customer|client)\b",
            r"\bwhat\s+have\s+we\s+done\s+for\b",
        ),
        (
            "show the customer history for Pat Nguyen",
            "what have we done for Greenway Apartments",
        ),
    ),
    _intent_patterns(
        "import_customers", D.LEAD_GENERATION,
        (
            r"\b(?:import|upload|bulk\s+add)\s+(?:a\s+|the\s+|our\s+)?(?:customers|clients|customer\s+list|contacts)\b",
        ),
        (
            "import customers from a CSV file",
            "bulk add our customer list",
        ),
        keywords=("csv", "import"),
    ),
)

_COMMUNICATION = (
    _intent_patterns(
        "contact_customer", D.COMMUNICATION,
        (
            r"\b(?:contact|call|text|email|message|ping)\s+(?:the\s+)?(?:customer|client|homeowner)\b",
            r"\breach\s+out\s+to\b",
            r"\bget\s+in\s+touch\s+with\b",
        ),
        (
            "contact the customer",
            "call the client about the delay",
            "reach out to Maria Lopez",
        ),
    ),
    _intent_patterns(
        "follow_up", D.COMMUNICATION,
        (
            r"\bfollow\s+up\s+(?:with|on)\b",
            r"\bcheck\s+in\s+with\b",
            r"\btouch\s+base\s+with\b",
        ),
        (
            "follow up with the Hendersons",
            "touch base with the client next week",
        ),
    ),
    _intent_patterns(
        "reply_to_message", D.COMMUNICATION,
        (r"\b(?:reply|respond)\s+to\b",),
        ("reply to the Garcia message: we'll be there at 9am",),
    ),
    _intent_patterns(
        "view_messages", D.COMMUNICATION,
        (
            r"\b(?:show|view|check|read)\s+(?:my\s+|the\s+|customer\s+|portal\s+|new\s+|unread\s+)*messages\b",
            r"\bunread\s+messages\b",
        ),
        (
            "show my unread messages",
            "check customer messages",
        ),
        keywords=("messages", "inbox"),
    ),
    _intent_patterns(
        "send_portal_invite", D.COMMUNICATION,
        (
            r"\bportal\s+(?:invite|invitation|access)\b",
            r"\binvite\s+.{0,40}?\bto\s+the\s+(?:customer\s+)?portal\b",
        ),
        (
            "send a portal invite to Ray Burns",
            "invite Olivia Park to the customer portal",
        ),
        keywords=("portal",),
    ),
)

_ASSESSMENTS = (
    _intent_patterns(
        "schedule_assessment", D.SITE_ASSESSMENT,
        (
            r"\b(?:schedule|book|set\s+up|arrange|plan)\s+(?:a\s+|an\s+)?(?:site\s+visit|site\s+assessment|assessment|property\s+assessment|inspection|walkthrough)\b",
        ),
        (
            "schedule a site visit for next Tuesday",
            "book an assessment at 42 Oak Street tomorrow",
        ),
        keywords=("site visit", "assessment", "walkthrough"),
    ),
    _intent_patterns(
        "complete_assessment", D.SITE_ASSESSMENT,
        (
            r"\b(?:complete|finish|wrap\s+up)\s+(?:the\s+|an\s+|this\s+)?assessment\b",
            r"\bassessment\s+(?:is\s+)?(?:done|complete|finished)\b",
        ),
        (
            "complete the assessment for the Johnson property",
            "the assessment is done at 42 Oak Street",
        ),
    ),
    _intent_patterns(
        "generate_assessment_report", D.SITE_ASSESSMENT,
        (
            r"\bassessment\s+report\b",
            r"\b(?:write\s+up|summarize)\s+(?:the\s+)?(?:assessment|site\s+visit)\b",
        ),
        (
            "generate an assessment report for the Lopez job",
            "summarize the site visit notes",
        ),
    ),
)

_QUOTING = (
    _intent_patterns(
        "create_quote", D.QUOTING,
        (
            r"\b(?:create|make|draft|prepare|write\s+up|build)\s+(?:a\s+|an\s+|the\s+)?(?:new\s+)?(?:quote|estimate|proposal|bid)\b",
        ),
        (
            "create a quote for John Smith",
            "draft an estimate for Greenway Apartments for $4,500",
        ),
        keywords=("quote", "estimate", "proposal"),
    ),
    _intent_patterns(
        "send_quote", D.QUOTING,
        (r"\b(?:send|email|deliver)\s+(?:the\s+|this\s+)?(?:quote|estimate|proposal)\b",),
        (
            "send quote QUO-1042 to the customer",
            "email the estimate to Dana Whitfield",
        ),
    ),
    _intent_patterns(
        "approve_quote", D.QUOTING,
        (
            r"\b(?:approve|accept)\s+(?:the\s+)?(?:quote|estimate|proposal)\b",
            r"\b(?:quote|estimate)\s+(?:was\s+|is\s+|got\s+)?(?:approved|accepted|signed)\b",
            r"\bmark\s+(?:the\s+)?(?:quote|estimate)\b.*\b(?:approved|accepted)\b",
        ),
        (
            "approve quote QUO-1042",
            "mark estimate EST-2231 as accepted",
        ),
    ),
    _intent_patterns(
        "convert_quote_to_job", D.QUOTING,
        (
            r"\b(?:convert|turn)\s+(?:the\s+|this\s+)?(?:approved\s+)?(?:quote|estimate)\b.*\b(?:job|work\s+order)\b",
            r"\b(?:job|work\s+order)\s+from\s+(?:the\s+|this\s+)?(?:approved\s+)?(?:quote|estimate)\b",
        ),
        (
            "convert quote QUO-1042 into a job",
            "turn the approved estimate into a work order",
        ),
    ),
    _intent_patterns(
        "revise_quote", D.QUOTING,
        (r"\b(?:revise|update|modify|change|adjust)\s+(?:the\s+|this\s+)?(?:quote|estimate|pricing\s+on)\b",),
        (
            "revise quote QUO-1042 with a 10% discount",
            "update the pricing on the Lopez estimate",
        ),
    ),
)

_JOBS = (
    _intent_patterns(
        "create_job", D.JOB_MANAGEMENT,
        (
            r"\b(?:create|add|set\s+up)\s+(?:a\s+|an\s+)?(?:new\s+)?(?:job|work\s+order)\b(?!.*\bfrom\s+(?:the\s+|this\s+)?(?:approved\s+)?(?:quote|estimate)\b)",
        ),
        (
            "create a new job for the Hendersons at 12 Birch Lane",
            "add a work order for Greenway Apartments",
        ),
    ),
    _intent_patterns(
        "update_job_status", D.JOB_MANAGEMENT,
        (
            r"\bmark\s+(?:the\s+|this\s+)?(?:job|work\s+order)\b.*\b(?:complete|completed|done|finished|in\s+progress|on\s+hold)\b",
            r"\b(?:close\s+out|close|start|reopen)\s+(?:the\s+|this\s+)?(?:job|work\s+order)\b",
            r"\bjob\s+status\b",
        ),
        (
            "mark job 4521 as complete",
            "close out work order WO-3310",
        ),
    ),
    _intent_patterns(
        "assign_job", D.JOB_MANAGEMENT,
        (
            r"\bassign\s+(?!.*\bchecklist\b).{1,40}?\bto\s+(?:the\s+|this\s+)?(?:job|work\s+order)\b",
            r"\bput\s+.{1,40}?\bon\s+(?:the\s+|this\s+)?(?:job|work\s+order)\b",
            r"\bassign\s+(?:the\s+|this\s+)?(?:job|work\s+order)\b.*\bto\b",
        ),
        (
            "assign Mike Reyes to job 4521",
            "put Sarah Chen on work order WO-3310",
        ),
    ),
    _intent_patterns(
        "view_job", D.JOB_MANAGEMENT,
        (
            r"\b(?:show|view|pull\s+up)\s+(?:me\s+)?(?:the\s+)?(?:details\s+(?:for|on)\s+)?(?:job|work\s+order)\b",
            r"\bjob\s+details\b",
        ),
        (
            "show me job 4521",
            "pull up the details for work order WO-3310",
        ),
    ),
    _intent_patterns(
        "add_job_note", D.JOB_MANAGEMENT,
        (
            r"\b(?:add|leave)\s+(?:a\s+)?(?:note|comment)\s+(?:to|on)\s+(?:the\s+|this\s+)?(?:job|work\s+order)\b",
            r"\bnote\s+on\s+(?:the\s+|this\s+)?(?:job|work\s+order)\b",
        ),
        (
            "add a note to job 4521: gate code is 1234",
            "leave a comment on work order WO-3310: customer asked for morning arrival",
        ),
    ),
    _intent_patterns(
        "cancel_job", D.JOB_MANAGEMENT,
        (r"\b(?:cancel|delete|remove)\s+(?:the\s+|this\s+)?(?:job|work\s+order)\b",),
        (
            "cancel job 4521",
            "delete work order WO-3310",
        ),
    ),
)

_SCHEDULING = (
    _intent_patterns(
        "schedule_job", D.SCHEDULING,
        (
            r"\b(?:schedule|book)\s+(?:the\s+|this\s+)?(?:job|work\s+order)\b",
            r"\b(?:schedule|book)\s+(?:the\s+)?[a-z]+(?:'s)?\s+(?:job|work\s+order)\b",
        ),
        (
            "schedule job 4521 for tomorrow at 9am",
            "book work order WO-3310 for next Monday",
        ),
    ),
    _intent_patterns(
        "reschedule_job", D.SCHEDULING,
        (
            r"\breschedule\b",
            r"\b(?:move|push|shift)\s+(?:the\s+|this\s+)?(?:job|work\s+order|appointment)\b",
        ),
        (
            "reschedule job 4521 to next Tuesday",
            "move work order WO-3310 to Friday afternoon",
        ),
    ),
    _intent_patterns(
        "batch_schedule", D.SCHEDULING,
        (
            r"\b(?:schedule|book)\s+all\b",
            r"\bbatch\s+schedul",
            r"\bauto-?\s?schedul",
            r"\bunscheduled\s+jobs\b",
        ),
        (
            "schedule all unscheduled jobs for next week",
            "auto-schedule the pending work this week",
        ),
    ),
    _intent_patterns(
        "check_availability", D.SCHEDULING,
        (
            r"\b(?:check|show)\s+(?:team\s+|crew\s+)?availability\b",
            r"\bwho(?:'s|\s+is)\s+(?:free|available)\b",
            r"\bwhen\s+is\s+.{1,30}?\s+(?:free|available)\b",
        ),
        (
            "check availability for next week",
            "who is free tomorrow morning",
        ),
    ),
    _intent_patterns(
        "optimize_route", D.SCHEDULING,
        (
            r"\b(?:optimize|plan|best|shortest)\s+(?:the\s+)?(?:route|routes|driving\s+order)\b",
            r"\broute\s+optimization\b",
        ),
        (
            "optimize the route for tomorrow",
            "plan the best route for Friday",
        ),
        keywords=("route",),
    ),
    _intent_patterns(
        "get_capacity", D.SCHEDULING,
        (
            r"\bcapacity\b",
            r"\bhow\s+(?:busy|booked)\b",
        ),
        (
            "what is our capacity next week",
            "how booked are we this month",
        ),
        keywords=("capacity",),
    ),
)

_TIME = (
    _intent_patterns(
        "clock_in", D.TIME_TRACKING,
        (
            r"\b(?:clock|punch)\s+(?:me\s+)?in\b",
            r"\bstart\s+(?:my\s+)?(?:shift|timer|the\s+clock)\b",
        ),
        (
            "clock in to job 4521",
            "start my shift",
        ),
    ),
    _intent_patterns(
        "clock_out", D.TIME_TRACKING,
        (
            r"\b(?:clock|punch)\s+(?:me\s+)?out\b",
            r"\b(?:end|stop)\s+(?:my\s+)?(?:shift|timer|the\s+clock)\b",
        ),
        (
            "clock me out",
            "end my shift for today",
        ),
    ),
    _intent_patterns(
        "log_time", D.TIME_TRACKING,
        (r"\b(?:log|record|add|enter)\b.{0,20}?\b(?:hours?|hrs?|minutes?|mins?)\b",),
        (
            "log 2 hours on job 4521",
            "record 45 minutes for yesterday",
        ),
    ),
    _intent_patterns(
        "view_timesheet", D.TIME_TRACKING,
        (
            r"\btimesheets?\b",
            r"\bhours\s+(?:have\s+)?(?:i|we|you)\s+worked\b",
            r"\bhow\s+many\s+hours\b",
        ),
        (
            "show my timesheet for this week",
            "how many hours did Mike Reyes work last week",
        ),
        keywords=("timesheet", "hours"),
    ),
)

_INVOICING = (
    _intent_patterns(
        "create_invoice", D.INVOICING,
        (
            r"\b(?:create|make|generate|draft|prepare)\s+(?:a\s+|an\s+|the\s+)?(?:new\s+)?invoice\b",
            r"\bbill\s+(?:the\s+)?(?:customer|client)\b",
            r"\binvoice\s+(?:the\s+)?(?:customer|client)\b",
        ),
        (
            "create an invoice for job 4521",
            "bill the customer for the spring cleanup",
        ),
        keywords=("invoice",),
    ),
    _intent_patterns(
        "send_invoice", D.INVOICING,
        (r"\b(?:send|email|deliver|resend)\s+(?:the\s+|this\s+)?invoice\b",),
        (
            "send invoice INV-1001 to the customer",
            "email the invoice to Greenway Apartments",
        ),
    ),
    _intent_patterns(
        "void_invoice", D.INVOICING,
        (r"\b(?:void|cancel|delete)\s+(?:the\s+|this\s+)?(?:duplicate\s+)?invoice\b",),
        (
            "void invoice INV-1001",
            "cancel the duplicate invoice INV-0987",
        ),
    ),
    _intent_patterns(
        "send_payment_reminder", D.INVOICING,
        (
            r"\b(?:payment\s+)?reminder\b",
            r"\bremind\s+.{0,30}?\bto\s+pay\b",
            r"\boverdue\s+invoices?\b",
        ),
        (
            "send a payment reminder for invoice INV-1001",
            "remind Dana Whitfield to pay the overdue balance",
        ),
    ),
)

_PAYMENTS = (
    _intent_patterns(
        "record_payment", D.PAYMENT_PROCESSING,
        (
            r"\b(?:record|log|enter)\s+(?:a\s+|the\s+)?(?:\S+\s+)?payment\b",
            r"\b(?:paid|payment\s+received|received\s+(?:a\s+)?payment)\b",
        ),
        (
            "record a $500 payment for invoice INV-1001",
            "Dana Whitfield paid twelve hundred dollars by check",
        ),
        keywords=("payment",),
    ),
    _intent_patterns(
        "process_card_payment", D.PAYMENT_PROCESSING,
        (
            r"\bcharge\s+(?:the\s+|their\s+)?(?:customer'?s?\s+)?(?:credit\s+)?card\b",
            r"\b(?:process|run)\s+(?:a\s+|the\s+)?(?:card\s+)?payment\b",
        ),
        (
            "charge the customer's card for invoice INV-1001",
            "run the card payment on INV-1002",
        ),
    ),
    _intent_patterns(
        "refund_payment", D.PAYMENT_PROCESSING,
        (r"\brefund\b",),
        (
            "refund $100 to Dana Whitfield",
            "issue a refund for payment PAY-3381",
        ),
        keywords=("refund",),
    ),
)

_SUBSCRIPTION_TARGET = r"(?:the\s+)?(?:\S+\s+)?(?:subscription|recurring\s+billing|billing\s+plan|service\s+plan)\b"

_RECURRING = (
    _intent_patterns(
        "create_recurring_plan", D.RECURRING_BILLING,
        (
            r"\b(?:set\s+up|create|start)\s+(?:a\s+)?(?:recurring|monthly|weekly|quarterly|yearly|annual)\s+(?:billing|plan|schedule|service|invoice)",
        ),
        (
            "set up monthly billing for Greenway Apartments",
            "create a recurring plan billed quarterly for Ray Burns",
        ),
        keywords=("subscription", "recurring"),
    ),
    _intent_patterns(
        "pause_subscription", D.RECURRING_BILLING,
        (rf"\b(?:pause|hold|suspend)\s+{_SUBSCRIPTION_TARGET}",),
        (
            "pause the Hendersons subscription until March",
            "suspend recurring billing for Ray Burns",
        ),
    ),
    _intent_patterns(
        "resume_subscription", D.RECURRING_BILLING,
        (rf"\b(?:resume|restart|reactivate|unpause)\s+{_SUBSCRIPTION_TARGET}",),
        (
            "resume the Hendersons subscription",
            "restart recurring billing for Ray Burns",
        ),
    ),
    _intent_patterns(
        "cancel_subscription", D.RECURRING_BILLING,
        (rf"\b(?:cancel|end|stop|terminate)\s+{_SUBSCRIPTION_TARGET}",),
        (
            "cancel the Greenway subscription",
            "stop recurring billing for Olivia Park",
        ),
    ),
)

_TEAM = (
    _intent_patterns(
        "invite_team_member", D.TEAM_MANAGEMENT,
        (
            r"\binvite\s+.*\bto\s+(?:the|our)\s+team\b",
            r"\b(?:invite|onboard)\s+(?:a\s+)?(?:new\s+)?(?:team\s+member|employee|technician|tech)\b",
        ),
        (
            "invite alex@crewmail.com to the team",
            "onboard a new technician named Luis Ortega",
        ),
        keywords=("team member", "technician"),
    ),
    _intent_patterns(
        "set_availability", D.TEAM_MANAGEMENT,
        (
            r"\b(?:set|update|change)\s+.{0,30}?\bavailability\b",
            r"\bworking\s+hours\b",
        ),
        (
            "set Mike Reyes availability to weekdays 9 to 5",
            "update Sarah Chen's working hours",
        ),
    ),
    _intent_patterns(
        "request_time_off", D.TEAM_MANAGEMENT,
        (r"\b(?:request|need|take|book)\s+(?:some\s+|a\s+)?(?:time\s+off|vacation|pto|day\s+off|days\s+off)\b",),
        (
            "request time off next Friday",
            "I need vacation Dec 23-27",
        ),
        keywords=("vacation", "pto", "time off"),
    ),
    _intent_patterns(
        "approve_time_off", D.TEAM_MANAGEMENT,
        (r"\bapprove\s+.{0,30}?\b(?:time\s+off|vacation|pto|leave)\b",),
        (
            "approve Mike Reyes time off request",
            "approve all pending PTO",
        ),
    ),
    _intent_patterns(
        "view_team_utilization", D.TEAM_MANAGEMENT,
        (
            r"\butilization\b",
            r"\bproductivity\b",
            r"\bhow\s+is\s+the\s+(?:team|crew)\s+doing\b",
        ),
        (
            "show team utilization for this month",
            "how is the crew doing this week",
        ),
    ),
)

_CHECKLISTS = (
    _intent_patterns(
        "create_checklist_template", D.CHECKLISTS,
        (
            r"\b(?:create|make|build)\s+(?:a\s+|an\s+)?(?:new\s+)?(?:[a-z]+\s+)?(?:checklist\s+template|inspection\s+template|checklist)\b",
        ),
        (
            "create a cleaning checklist template",
            "make a new inspection template",
        ),
    ),
    _intent_patterns(
        "assign_checklist", D.CHECKLISTS,
        (
            r"\b(?:assign|attach)\s+(?:the\s+|a\s+|an\s+)?(?:[a-z]+\s+)?checklist\b",
            r"\badd\s+(?:the\s+|a\s+|an\s+)?(?:[a-z]+\s+)?checklist\s+to\b",
        ),
        (
            "assign the cleaning checklist to job 4521",
            "attach the safety checklist to work order WO-3310",
        ),
    ),
    _intent_patterns(
        "complete_checklist_task", D.CHECKLISTS,
        (
            r"\b(?:complete|finish|check\s+off|tick\s+off)\s+(?:the\s+)?(?:\w+\s+){0,3}?(?:task|item)\b",
            r"\bmark\s+.{1,40}?\bas\s+done\b",
        ),
        (
            "check off the gutter cleaning task",
            "mark the window washing item as done",
        ),
    ),
    _intent_patterns(
        "view_checklist_progress", D.CHECKLISTS,
        (
            r"\bchecklist\s+(?:progress|status)\b",
            r"\bhow\s+(?:is|are)\s+the\s+.{0,30}?checklists?\s+(?:going|coming\s+along)\b",
        ),
        (
            "show checklist progress for job 4521",
            "how is the cleaning checklist going",
        ),
        keywords=("checklist",),
    ),
)

INTENT_PATTERNS: tuple[PatternDefinition, ...] = (
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
