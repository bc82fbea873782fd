"""Trigger phrases for multi-step workflows.

One pattern set per workflow, with the same id as the workflow. Sets are
tried in registration order and the first hit wins, so a compound request
such as "add a new customer and schedule a site visit" starts the lead
workflow.
"""

from switchboard.patterns.models import PatternDefinition, PatternPool
from switchboard.taxonomy.enums import Domain

D = Domain

_PRONOUN = r"(?:them|him|her)"


def _workflow_patterns(
    workflow_id: str,
    domain: Domain,
    patterns: tuple[str, ...],
    examples: tuple[str, ...],
    priority: int = 100,
) -> PatternDefinition:
    return PatternDefinition(
        id=workflow_id,
        pool=PatternPool.WORKFLOW,
        target_id=workflow_id,
        domain=domain,
        trigger_patterns=patterns,
        examples=examples,
        priority=priority,
    )


WORKFLOW_PATTERNS: tuple[PatternDefinition, ...] = (
    _workflow_patterns(
        "complete_lead_generation", D.LEAD_GENERATION,
        (
            # direct capture
            r"(?<!\bthis\s)(?<!\bthe\s)\bnew\s+(?:lead|prospect)\b",
            r"\b(?:add|create|capture|log|register|enter)\s+(?:a\s+)?(?:new\s+)?(?:customer|lead|prospect)\b",
            r"\bcustomer\s+inquiry\b",
            # inbound channels
            r"\b(?:got|received)\s+(?:a\s+)?(?:new\s+)?(?:call|inquiry|voicemail|lead)\b",
            r"\bwebsite\s+(?:form|submission|inquiry|lead)\b",
            r"\breferral\s+from\b",
            r"\bcame\s+in\s+(?:from|via|through)\b",
            r"\blead\s+(?:from|via)\s+(?:google|facebook|yelp|thumbtack|nextdoor|angi|the\s+website|our\s+website|website|a\s+referral|referral)\b",
            # expressed need
            r"\bwants?\s+(?:a\s+)?(?:quote|estimate|service)\b",
            r"\bneeds?\s+(?:landscaping|lawn|tree|service|help|work\s+done)\b",
            r"\binterested\s+in\s+(?:our|my|the)?\s*services?\b",
            r"\blooking\s+for\s+(?:a\s+)?(?:landscaper|contractor|service)\b",
            r"\b(?:requested|asked\s+for|asking\s+for)\s+(?:a\s+|an\s+)?(?:quote|estimate)\b",
            r"\bsomeone\s+(?:just\s+)?(?:called|emailed|texted)\b",
            r"\b(?:email|text|voicemail)\s+from\b",
            r"\bcontacted\s+us\b",
            # qualification language
            r"\b(?:potential|prospective|possible)\s+(?:new\s+)?(?:customer|client|lead)\b",
            r"\b(?:hot|warm|qualified)\s+lead\b",
        ),
        (
            "new lead from John Smith",
            "add a new customer",
            "got a call from someone interested in lawn care",
            "referral from Bob Johnson",
            "customer wants a quote for lawn maintenance",
            "hot lead from neighbor referral",
        ),
        priority=10,
    ),
    _workflow_patterns(
        "complete_customer_communication", D.COMMUNICATION,
        (
            r"\b(?:contact|message|email|text|call|ping)\s+(?:the\s+)?(?:customer|client|homeowner)\b",
            r"\bsend\s+(?:a\s+)?message\s+to\b",
            r"\bfollow\s+up\s+with\b",
            r"\bcheck\s+in\s+(?:with|on)\b",
            r"\btouch\s+base\s+with\b",
            rf"\bget\s+back\s+to\s+{_PRONOUN}\b",
            r"\bcircle\s+back\s+(?:with|to)\b",
            r"\breconnect\s+with\b",
            r"\breach\s+out\s+to\b",
            r"\bcommunicate\s+with\b",
            r"\b(?:respond|reply)\s+to\b",
            r"\bget\s+in\s+touch\s+with\b",
            r"\b(?:start|open)\s+(?:a\s+)?conversation\s+with\b",
            rf"\blet\s+{_PRONOUN}\s+know\b",
            rf"\bgive\s+{_PRONOUN}\s+a\s+(?:call|ring)\b",
            rf"\bdrop\s+{_PRONOUN}\s+a\s+(?:line|message|note)\b",
            rf"\bshoot\s+{_PRONOUN}\s+a\s+(?:message|email|text)\b",
            r"\b(?:update|notify)\s+(?:the\s+customer|the\s+client|them)\b",
            r"\b(?:inform|tell)\s+(?:them|the\s+customer)\b",
            r"\bkeep\s+(?:them|the\s+customer)\s+posted\b",
            r"\bgive\s+them\s+an\s+update\b",
            rf"\b(?:call|contact|text|email)\s+{_PRONOUN}\b",
            r"\bcontact\s+(?:this|the)\s+(?:new\s+)?lead\b",
            rf"\bhit\s+{_PRONOUN}\s+up\b",
        ),
        (
            "contact the customer",
            "follow up with the homeowner",
            "let them know we can do it",
            "contact this new lead",
            "reply to the customer email",
        ),
        priority=20,
    ),
    _workflow_patterns(
        "complete_site_assessment", D.SITE_ASSESSMENT,
        (
            r"\bsite\s+(?:assessment|inspection|visit)\b",
            r"\bproperty\s+(?:assessment|inspection|evaluation|walkthrough)\b",
            r"\bon-?site\s+(?:evaluation|inspection|assessment)\b",
            r"\bformal\s+assessment\b",
            r"\b(?:schedule|book|set\s+up|arrange|plan)\s+(?:a\s+|an\s+)?(?:assessment|inspection|appointment\s+to\s+assess)\b",
            r"\b(?:conduct|perform|do|run|complete|carry\s+out)\s+(?:a\s+|an\s+)?(?:assessment|walkthrough|inspection)\b",
            r"\bgo\s+(?:out\s+)?(?:and\s+)?look\s+at\s+(?:the\s+|their\s+)?(?:property|site|job|yard|lawn)\b",
            r"\bcheck\s+out\s+(?:the\s+|their\s+)?(?:property|site|job\s+site|place|yard)\b",
            r"\btake\s+a\s+look\s+at\b",
            r"\bmeasure\s+(?:the\s+|their\s+)?(?:property|site|yard|lawn|area)\b",
            r"\bscope\s+(?:out\s+)?(?:the\s+)?(?:property|site|job)\b",
            r"\bsurvey\s+(?:the\s+)?(?:property|site|yard|land)\b",
            r"\bwalk\s+(?:the\s+)?(?:property|site|yard|lot)\b",
            r"\bsend\s+someone\s+(?:out\s+)?to\s+(?:look|check|assess|measure|inspect)\b",
            r"\bhave\s+someone\s+(?:go\s+out|check|look|assess)\b",
            r"\bdispatch\s+(?:someone|a\s+team|a\s+crew)\s+to\b",
            r"\bget\s+someone\s+(?:out\s+)?there\s+to\b",
            r"\bneed\s+someone\s+to\s+(?:go\s+)?(?:look|check|assess)\b",
            r"\bassign\s+(?:someone|an?\s+assessor)\s+to\b",
        ),
        (
            "schedule a site visit",
            "property assessment needed",
            "do a walkthrough of the yard",
            "take a look at their yard",
            "send someone out to look at the property",
        ),
        priority=30,
    ),
    _workflow_patterns(
        "quote_to_job", D.QUOTING,
        (
            rf"\bgive\s+{_PRONOUN}\s+a\s+(?:price|quote|estimate)\b",
            r"\bprice\s+(?:this|it)\s+(?:out|up)\b",
            r"\bquote\s+(?:this|the\s+job|them)\b",
            r"\bhow\s+much\s+(?:would|will|does|for|to)\b",
            r"\b(?:convert|turn)\s+(?:the\s+|this\s+)?(?:approved\s+)?(?:quote|estimate)\s+(?:in)?to\s+(?:a\s+)?(?:job|work\s+order)\b",
            r"\bquote\s+(?:was\s+|got\s+|is\s+)?(?:approved|accepted|signed)\b",
            r"\b(?:create|draft|prepare)\s+(?:a\s+|an\s+)?(?:quote|estimate)\s+(?:for|based\s+on)\b",
        ),
        (
            "convert the approved quote into a job",
            "price this out",
            "how much would this cost",
        ),
        priority=40,
    ),
    _workflow_patterns(
        "job_to_invoice", D.INVOICING,
        (
            r"\b(?:close\s+out|wrap\s+up|finish|complete)\s+(?:the\s+|this\s+)?job\s+and\s+(?:send\s+(?:the\s+|an\s+)?invoice|invoice|bill)\b",
            r"\b(?:invoice|bill)\s+(?:them|the\s+customer|the\s+client)\s+for\s+(?:the\s+)?(?:finished|completed)\s+(?:job|work)\b",
            r"\bjob\s+is\s+(?:done|finished|complete)\b.*\b(?:invoice|bill)\b",
        ),
        (
            "close out the job and send the invoice",
            "invoice the customer for the completed work",
            "the job is done so send them the invoice",
        ),
        priority=50,
    ),
)
