"""Labeled phrases for the coverage harness.

Read-only fixture data. Nothing on the request path imports this module.

WORKFLOW_CORPUS covers the ways people ask to start a workflow: formal
requests, conversational phrasing, trade vernacular, follow-ups that come
after an earlier step, misspellings and off-topic chatter. Two misspelled
phrases are known misses and count as false negatives.

INTENT_CORPUS is written independently of the declared intent examples:
formal, conversational and trade phrasing for the intents, a few phrases
that lean on the current route, and off-topic chatter. A bare "cancel it"
on the jobs page is a known miss.
"""

from switchboard.coverage.models import CorpusEntry, CorpusSource
from switchboard.patterns.intent_catalog import INTENT_PATTERNS
from switchboard.patterns.workflow_catalog import WORKFLOW_PATTERNS

FORMAL = CorpusSource.FORMAL
CONVERSATIONAL = CorpusSource.CONVERSATIONAL
INDUSTRY = CorpusSource.INDUSTRY

LEAD = "complete_lead_generation"
COMMUNICATION = "complete_customer_communication"
SITE = "complete_site_assessment"
QUOTE = "quote_to_job"
INVOICE = "job_to_invoice"

_WORKFLOW_DOMAINS = {definition.target_id: definition.domain for definition in WORKFLOW_PATTERNS}
_INTENT_DOMAINS = {definition.target_id: definition.domain for definition in INTENT_PATTERNS}

_OFF_TOPIC = (
    "hello",
    "hello there",
    "thanks",
    "whats the weather like",
    "how do I use this",
)


def _workflow(
    phrase: str,
    pattern_id: str | None,
    source: CorpusSource,
    category: str,
) -> CorpusEntry:
    return CorpusEntry(
        phrase=phrase,
        expected_pattern_id=pattern_id,
        expected_domain=_WORKFLOW_DOMAINS[pattern_id] if pattern_id else None,
        source=source,
        category=category,
    )


_LEAD_PHRASES = (
    ("new lead from John Smith", FORMAL, "direct_action"),
    ("add a new customer", FORMAL, "direct_action"),
    ("create lead for Sarah", FORMAL, "direct_action"),
    ("capture new lead", FORMAL, "direct_action"),
    ("log a customer request", FORMAL, "direct_action"),
    ("register new customer Mike", FORMAL, "direct_action"),
    ("got a call from someone interested in lawn care", CONVERSATIONAL, "inquiry_source"),
    ("received a new inquiry about tree removal", CONVERSATIONAL, "inquiry_source"),
    ("website form submission from Jane", FORMAL, "inquiry_source"),
    ("referral from Bob Johnson", FORMAL, "inquiry_source"),
    ("customer inquiry about landscaping", FORMAL, "inquiry_source"),
    ("lead from google", CONVERSATIONAL, "inquiry_source"),
    ("came in from yelp", CONVERSATIONAL, "inquiry_source"),
    ("customer wants a quote for lawn maintenance", CONVERSATIONAL, "service_need"),
    ("someone needs landscaping help", CONVERSATIONAL, "service_need"),
    ("homeowner interested in our services", CONVERSATIONAL, "service_need"),
    ("looking for a landscaper for their backyard", CONVERSATIONAL, "service_need"),
    ("they requested an estimate", CONVERSATIONAL, "service_need"),
    ("someone just called about mulching", CONVERSATIONAL, "contact_based"),
    ("email from Tom about hedge trimming", CONVERSATIONAL, "contact_based"),
    ("got a voicemail from potential client", CONVERSATIONAL, "contact_based"),
    ("text from customer about spring cleanup", CONVERSATIONAL, "contact_based"),
    ("they contacted us through facebook", CONVERSATIONAL, "contact_based"),
    ("potential customer for weekly mowing", FORMAL, "prospect_language"),
    ("new prospect interested in irrigation", FORMAL, "prospect_language"),
    ("hot lead from neighbor referral", INDUSTRY, "prospect_language"),
    ("qualified lead for commercial property", FORMAL, "prospect_language"),
    ("new lead", FORMAL, "minimal"),
)

_COMMUNICATION_PHRASES = (
    ("contact the customer", FORMAL, "direct_contact"),
    ("message the customer about their quote", FORMAL, "direct_contact"),
    ("send a message to Mrs. Johnson", FORMAL, "direct_contact"),
    ("email the customer about scheduling", FORMAL, "direct_contact"),
    ("text the customer the estimate", FORMAL, "direct_contact"),
    ("call the customer back", FORMAL, "direct_contact"),
    ("follow up with the homeowner", FORMAL, "follow_up"),
    ("check in with them about the project", CONVERSATIONAL, "follow_up"),
    ("touch base with the client", CONVERSATIONAL, "follow_up"),
    ("get back to them today", CONVERSATIONAL, "follow_up"),
    ("circle back with the customer", CONVERSATIONAL, "follow_up"),
    ("reconnect with the lead from last week", CONVERSATIONAL, "follow_up"),
    ("reach out to the customer about availability", FORMAL, "communication_verbs"),
    ("communicate with them about changes", FORMAL, "communication_verbs"),
    ("respond to their inquiry", FORMAL, "communication_verbs"),
    ("reply to the customer email", FORMAL, "communication_verbs"),
    ("get in touch with them this afternoon", CONVERSATIONAL, "communication_verbs"),
    ("start a conversation with the new lead", FORMAL, "communication_verbs"),
    ("let them know we can do it", CONVERSATIONAL, "informal"),
    ("give them a call about the proposal", CONVERSATIONAL, "informal"),
    ("drop them a line about timing", CONVERSATIONAL, "informal"),
    ("shoot them a message about tomorrow", CONVERSATIONAL, "informal"),
    ("ping the customer about the job", CONVERSATIONAL, "informal"),
    ("update the customer on job status", FORMAL, "status_update"),
    ("notify them about the delay", FORMAL, "status_update"),
    ("inform them the crew is on the way", FORMAL, "status_update"),
    ("keep them posted on progress", CONVERSATIONAL, "status_update"),
    ("give them an update on the timeline", CONVERSATIONAL, "status_update"),
    ("contact this new lead", CONVERSATIONAL, "follow_on"),
    ("reach out to the customer we just added", CONVERSATIONAL, "follow_on"),
    ("now call them back", CONVERSATIONAL, "follow_on"),
    ("now contact them", CONVERSATIONAL, "follow_on"),
    ("let them know the price", CONVERSATIONAL, "follow_on"),
    ("update the customer", FORMAL, "follow_on"),
    ("call them", CONVERSATIONAL, "minimal"),
)

_SITE_PHRASES = (
    ("site assessment for 123 Main St", FORMAL, "formal_assessment"),
    ("property assessment needed", FORMAL, "formal_assessment"),
    ("on-site evaluation for the Johnson property", FORMAL, "formal_assessment"),
    ("property inspection at the commercial lot", FORMAL, "formal_assessment"),
    ("site inspection required", FORMAL, "formal_assessment"),
    ("formal assessment of the backyard", FORMAL, "formal_assessment"),
    ("schedule a site visit", FORMAL, "scheduling"),
    ("book a site assessment for tomorrow", FORMAL, "scheduling"),
    ("set up a site visit with the customer", FORMAL, "scheduling"),
    ("arrange a property assessment", FORMAL, "scheduling"),
    ("plan a site assessment for next week", FORMAL, "scheduling"),
    ("schedule an inspection", FORMAL, "scheduling"),
    ("conduct a site visit", FORMAL, "action"),
    ("perform an assessment of the property", FORMAL, "action"),
    ("do a walkthrough of the yard", CONVERSATIONAL, "action"),
    ("run an assessment this afternoon", CONVERSATIONAL, "action"),
    ("complete an assessment before quoting", FORMAL, "action"),
    ("go out and look at the property", INDUSTRY, "vernacular"),
    ("check out the site", INDUSTRY, "vernacular"),
    ("take a look at their yard", INDUSTRY, "vernacular"),
    ("measure the property", INDUSTRY, "vernacular"),
    ("scope out the job site", INDUSTRY, "vernacular"),
    ("survey the yard before estimating", INDUSTRY, "vernacular"),
    ("walk the property", INDUSTRY, "vernacular"),
    ("property walkthrough", INDUSTRY, "vernacular"),
    ("send someone out to look at the property", CONVERSATIONAL, "dispatch"),
    ("have someone check out the site", CONVERSATIONAL, "dispatch"),
    ("dispatch someone to assess the yard", FORMAL, "dispatch"),
    ("get someone out there to measure", CONVERSATIONAL, "dispatch"),
    ("need someone to go look at the job", CONVERSATIONAL, "dispatch"),
    ("assign an assessor to the property", FORMAL, "dispatch"),
    ("schedule an assessment for this customer", FORMAL, "follow_on"),
    ("book a site visit for them", FORMAL, "follow_on"),
    ("go check out their property", INDUSTRY, "follow_on"),
    ("send someone to check it out", CONVERSATIONAL, "follow_on"),
    ("site visit", FORMAL, "minimal"),
    ("schdule a site visit", CONVERSATIONAL, "misspelled"),
)

_QUOTE_PHRASES = (
    ("give them a quote based on the assessment", CONVERSATIONAL, "follow_on"),
    ("price this out", INDUSTRY, "follow_on"),
    ("quote the job", INDUSTRY, "follow_on"),
    ("how much would this cost", CONVERSATIONAL, "follow_on"),
    ("convert the approved quote into a job", FORMAL, "conversion"),
    ("the quote was approved", CONVERSATIONAL, "conversion"),
    ("turn this estimate into a job", CONVERSATIONAL, "conversion"),
)

_INVOICE_PHRASES = (
    ("close out the job and send the invoice", FORMAL, "close_out"),
    ("invoice the customer for the completed work", FORMAL, "close_out"),
    ("the job is done so send them the invoice", CONVERSATIONAL, "close_out"),
    ("wrap up the job and bill them", INDUSTRY, "close_out"),
)

_KNOWN_MISSES = (
    ("new lede from John", LEAD),
    ("contct the customer", COMMUNICATION),
)

WORKFLOW_CORPUS: tuple[CorpusEntry, ...] = (
    *(_workflow(phrase, LEAD, source, category) for phrase, source, category in _LEAD_PHRASES),
    *(_workflow(phrase, COMMUNICATION, source, category) for phrase, source, category in _COMMUNICATION_PHRASES),
    *(_workflow(phrase, SITE, source, category) for phrase, source, category in _SITE_PHRASES),
    *(_workflow(phrase, QUOTE, source, category) for phrase, source, category in _QUOTE_PHRASES),
    *(_workflow(phrase, INVOICE, source, category) for phrase, source, category in _INVOICE_PHRASES),
    *(_workflow(phrase, pattern_id, CONVERSATIONAL, "misspelled") for phrase, pattern_id in _KNOWN_MISSES),
    *(_workflow(phrase, None, CONVERSATIONAL, "off_topic") for phrase in _OFF_TOPIC),
)


def _intent(
    phrase: str,
    intent_id: str | None,
    source: CorpusSource,
    route: str | None = None,
) -> CorpusEntry:
    domain = _INTENT_DOMAINS[intent_id] if intent_id else None
    return CorpusEntry(
        phrase=phrase,
        expected_pattern_id=intent_id,
        expected_domain=domain,
        source=source,
        category=domain.value if domain else "off_topic",
        route=route,
    )


_INTENT_PHRASES = (
    ("schedule a job", "schedule_job", FORMAL),
    ("create a quote", "create_quote", FORMAL),
    ("send an invoice", "create_invoice", FORMAL),
    ("find customer", "search_customer", FORMAL),
    ("check team availability", "check_availability", FORMAL),
    ("update job status", "update_job_status", FORMAL),
    ("record a payment", "record_payment", FORMAL),
    ("we just got a new prospect from the home show", "create_lead", CONVERSATIONAL),
    ("put in a new client for me, Dana Whitfield", "create_lead", CONVERSATIONAL),
    ("pull up the customer Maria Lopez", "search_customer", FORMAL),
    ("edit the client's phone to 555-201-3344", "update_customer", FORMAL),
    ("what have we done for the Garcias this year", "view_customer_history", CONVERSATIONAL),
    ("import our customer list from the old system", "import_customers", FORMAL),
    ("call the homeowner about the gate code", "contact_customer", INDUSTRY),
    ("reach out to Maria about tomorrow", "contact_customer", CONVERSATIONAL),
    ("email the customer", "contact_customer", FORMAL),
    ("follow up with the Hendersons on that estimate", "follow_up", CONVERSATIONAL),
    ("touch base with Mike about the fence", "follow_up", INDUSTRY),
    ("respond to the message from the Lees", "reply_to_message", FORMAL),
    ("any unread messages", "view_messages", CONVERSATIONAL),
    ("give the Parks portal access", "send_portal_invite", FORMAL),
    ("book a walkthrough at the Ortiz place", "schedule_assessment", INDUSTRY),
    ("the assessment is done at 12 Oak Street", "complete_assessment", INDUSTRY),
    ("write up the site visit for the Nguyens", "generate_assessment_report", INDUSTRY),
    ("draft a proposal for the backyard patio", "create_quote", FORMAL),
    ("quote the job", "create_quote", INDUSTRY),
    ("email the estimate to Dana", "send_quote", FORMAL),
    ("turn the estimate into a job", "convert_quote_to_job", INDUSTRY),
    ("adjust the pricing on the Lopez bid", "revise_quote", INDUSTRY),
    ("set up a new work order for the Kim residence", "create_job", FORMAL),
    ("close out the job on Elm Street", "update_job_status", INDUSTRY),
    ("put Sarah on the job Friday", "assign_job", INDUSTRY),
    ("show me the details for job 4521", "view_job", FORMAL),
    ("leave a note on the job about the dog", "add_job_note", CONVERSATIONAL),
    ("cancel the work order for the Bakers", "cancel_job", FORMAL),
    ("book the Henderson job for next tuesday", "schedule_job", FORMAL),
    ("push the appointment to Thursday", "reschedule_job", CONVERSATIONAL),
    ("auto schedule everything that is open", "batch_schedule", CONVERSATIONAL),
    ("who's free on Friday afternoon", "check_availability", CONVERSATIONAL),
    ("what's the shortest route for today", "optimize_route", INDUSTRY),
    ("how booked are we next week", "get_capacity", CONVERSATIONAL),
    ("punch me in", "clock_in", INDUSTRY),
    ("stop the clock, heading home", "clock_out", CONVERSATIONAL),
    ("add 3 hours to the Lopez job", "log_time", FORMAL),
    ("how many hours did I put in this week", "view_timesheet", CONVERSATIONAL),
    ("bill the customer for the repair", "create_invoice", INDUSTRY),
    ("resend the invoice to the Parks", "send_invoice", FORMAL),
    ("delete the duplicate invoice", "void_invoice", FORMAL),
    ("nudge the Garcias about their overdue invoice", "send_payment_reminder", CONVERSATIONAL),
    ("they paid $450 cash", "record_payment", CONVERSATIONAL),
    ("run the card payment for the Kims", "process_card_payment", FORMAL),
    ("refund the Lopez deposit", "refund_payment", FORMAL),
    ("start a monthly service plan for the Lees", "create_recurring_plan", FORMAL),
    ("restart the Garcia service plan", "resume_subscription", FORMAL),
    ("stop the recurring billing for unit 4", "cancel_subscription", FORMAL),
    ("onboard a new technician", "invite_team_member", FORMAL),
    ("change my availability for next week", "set_availability", FORMAL),
    ("I need a day off on the 20th", "request_time_off", CONVERSATIONAL),
    ("approve Mike's vacation", "approve_time_off", FORMAL),
    ("how is the crew doing this month", "view_team_utilization", CONVERSATIONAL),
    ("attach the safety checklist to the Lopez job", "assign_checklist", FORMAL),
    ("check off the gutter task", "complete_checklist_task", INDUSTRY),
    ("checklist status for the Ortiz install", "view_checklist_progress", FORMAL),
)

_ROUTED_PHRASES = (
    ("what's my capacity", "get_capacity", "/calendar"),
    ("cancel it", "cancel_job", "/jobs"),
)

INTENT_CORPUS: tuple[CorpusEntry, ...] = (
    *(_intent(phrase, intent_id, source) for phrase, intent_id, source in _INTENT_PHRASES),
    *(_intent(phrase, intent_id, CONVERSATIONAL, route) for phrase, intent_id, route in _ROUTED_PHRASES),
    *(_intent(phrase, None, CONVERSATIONAL) for phrase in (*_OFF_TOPIC, "tell me a joke")),
)
