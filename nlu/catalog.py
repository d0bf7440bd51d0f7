"""
Contract query catalog - intents, query shapes and the vocabulary tables
shared by every stage of the pipeline.

Everything here is plain data. `nlu.config.build_default_config` freezes these
tables into a `PipelineConfig` which is what the pipeline components receive.
"""

from enum import Enum


class Intent(str, Enum):
    """Closed set of intents a contract query can resolve to."""

    SHOW_CONTRACT = "show_contract"
    GET_CONTRACT_INFO = "get_contract_info"
    GET_CONTRACT_EXPIRATION = "get_contract_expiration"
    LIST_EXPIRED_CONTRACTS = "list_expired_contracts"
    LIST_ACTIVE_CONTRACTS = "list_active_contracts"
    FILTER_CONTRACTS_BY_CUSTOMER = "filter_contracts_by_customer"
    FILTER_CONTRACTS_BY_USER = "filter_contracts_by_user"
    SEARCH_CONTRACTS = "search_contracts"
    LIST_CONTRACTS = "list_contracts"
    CONTRACT_STATUS = "contract_status"
    CREATE_CONTRACT = "create_contract"
    GUIDE_CONTRACT = "guide_contract"
    UPDATE_CONTRACT = "update_contract"
    UNKNOWN = "unknown"


class QueryType(str, Enum):
    """Shape of the query."""

    SPECIFIC = "specific"
    LIST = "list"
    SEARCH = "search"
    FILTER = "filter"
    HELP = "help"
    CONTRACT = "contract"
    GENERAL = "general"


class ActionType(str, Enum):
    """Operation the user is asking for."""

    SHOW = "show"
    GET = "get"
    LIST = "list"
    SEARCH = "search"
    CREATE = "create"
    GUIDE = "guide"
    UPDATE = "update"
    FILTER = "filter"
    UNKNOWN = "unknown"


# =============================================================================
# INTENT THRESHOLDS
# =============================================================================

INTENT_THRESHOLDS = {
    Intent.SHOW_CONTRACT: 0.55,
    Intent.GET_CONTRACT_INFO: 0.55,
    Intent.GET_CONTRACT_EXPIRATION: 0.60,
    Intent.LIST_EXPIRED_CONTRACTS: 0.55,
    Intent.LIST_ACTIVE_CONTRACTS: 0.55,
    Intent.FILTER_CONTRACTS_BY_CUSTOMER: 0.60,
    Intent.FILTER_CONTRACTS_BY_USER: 0.65,
    Intent.SEARCH_CONTRACTS: 0.55,
    Intent.LIST_CONTRACTS: 0.55,
    Intent.CONTRACT_STATUS: 0.60,
    Intent.CREATE_CONTRACT: 0.60,
    Intent.GUIDE_CONTRACT: 0.65,
    Intent.UPDATE_CONTRACT: 0.60,
}


# =============================================================================
# KEYWORD SIGNATURES
# =============================================================================
# Order matters only for readability; matching is case-insensitive and a
# single-word entry also counts as a token signature.

INTENT_KEYWORDS = {
    Intent.SHOW_CONTRACT: [
        "show contract",
        "display contract",
        "view contract",
        "open contract",
        "pull up contract",
        "show",
        "display",
        "view",
        "shw",
    ],
    Intent.GET_CONTRACT_INFO: [
        "contract info",
        "contract information",
        "contract details",
        "get contract",
        "tell me about",
        "details",
        "information",
        "info",
        "summary",
    ],
    Intent.GET_CONTRACT_EXPIRATION: [
        "expiration date",
        "expiry date",
        "end date",
        "when does",
        "when will",
        "expiration",
        "expiry",
        "expire",
        "expires",
    ],
    Intent.LIST_EXPIRED_CONTRACTS: [
        "expired contracts",
        "lapsed contracts",
        "past due",
        "expired",
        "lapsed",
        "terminated",
    ],
    Intent.LIST_ACTIVE_CONTRACTS: [
        "active contracts",
        "current contracts",
        "running contracts",
        "in force",
        "active",
        "ongoing",
        "current",
    ],
    Intent.FILTER_CONTRACTS_BY_CUSTOMER: [
        "by customer",
        "for customer",
        "for client",
        "customer contracts",
        "customer",
        "client",
        "account",
    ],
    Intent.FILTER_CONTRACTS_BY_USER: [
        "created by",
        "authored by",
        "made by",
        "by user",
        "my contracts",
        "creator",
        "author",
        "owner",
        "user",
    ],
    Intent.SEARCH_CONTRACTS: [
        "search for",
        "look for",
        "look up",
        "search",
        "find",
        "lookup",
        "locate",
        "containing",
    ],
    Intent.LIST_CONTRACTS: [
        "list contracts",
        "list all",
        "all contracts",
        "every contract",
        "list",
        "lst",
    ],
    Intent.CONTRACT_STATUS: [
        "contract status",
        "status of",
        "state of",
        "is contract",
        "status",
        "staus",
    ],
    Intent.CREATE_CONTRACT: [
        "create contract",
        "new contract",
        "make a contract",
        "set up a contract",
        "create",
        "draft",
        "crete",
        "creat",
    ],
    Intent.GUIDE_CONTRACT: [
        "how to",
        "how do i",
        "how can i",
        "walk me through",
        "process for",
        "how",
        "guide",
        "help",
        "steps",
        "explain",
        "instructions",
    ],
    Intent.UPDATE_CONTRACT: [
        "update contract",
        "change contract",
        "modify contract",
        "update",
        "modify",
        "edit",
        "amend",
        "renew",
    ],
}


# =============================================================================
# OVERRIDE VOCABULARY
# =============================================================================

EXPIRATION_TERMS = [
    "expiration",
    "expiry",
    "expire",
    "expires",
    "expired",
    "expiring",
    "end date",
]

ACTIVE_TERMS = ["active", "ongoing", "in force"]

CUSTOMER_TERMS = ["customer", "customers", "client", "clients"]

SEARCH_TERMS = ["search", "find", "lookup", "look for", "look up", "locate"]

# Any of these switches the override detectors off.
INSTRUCTION_TERMS = [
    "create",
    "draft",
    "new contract",
    "update",
    "modify",
    "edit",
    "amend",
    "guide",
    "help",
    "how to",
    "how do i",
    "how can i",
]


# =============================================================================
# QUERY SHAPE CUES
# =============================================================================
# Checked in order; the first group with a hit decides the type.

QUERY_TYPE_CUES = [
    (QueryType.SEARCH, ["search", "find", "look"]),
    (QueryType.SPECIFIC, ["show", "display", "view"]),
    (QueryType.LIST, ["list", "all"]),
    (QueryType.CONTRACT, ["create", "make", "new"]),
    (QueryType.HELP, ["how", "help", "guide"]),
]

# Only consulted when no cue above matched and no contract number is present.
FILTER_CUES = ["filter", "customer", "account", "client"]

ACTION_TYPE_CUES = [
    (ActionType.SEARCH, ["search", "find", "look"]),
    (ActionType.SHOW, ["show", "display", "view"]),
    (ActionType.GET, ["get", "retrieve", "fetch", "what", "when"]),
    (ActionType.LIST, ["list", "all"]),
    (ActionType.CREATE, ["create", "make", "new", "draft"]),
    (ActionType.GUIDE, ["how", "help", "guide", "steps"]),
    (ActionType.UPDATE, ["update", "modify", "change", "edit", "amend"]),
    (ActionType.FILTER, ["filter", "customer", "client", "by"]),
]

# Keywords scored by Jaro-Winkler against each query token.
ACTION_KEYWORDS = {
    "search": ActionType.SEARCH,
    "show": ActionType.SHOW,
    "get": ActionType.GET,
    "list": ActionType.LIST,
    "create": ActionType.CREATE,
    "help": ActionType.GUIDE,
    "update": ActionType.UPDATE,
    "filter": ActionType.FILTER,
}


# =============================================================================
# LEXICON
# =============================================================================

BUSINESS_NAMES = [
    "boeing",
    "honeywell",
    "microsoft",
    "apple",
    "google",
    "amazon",
    "oracle",
    "ibm",
    "cisco",
    "intel",
]

CONTRACT_FIELDS = [
    "expirationDate",
    "effectiveDate",
    "createdDate",
    "updatedDate",
    "startDate",
    "endDate",
    "renewalDate",
    "terminationDate",
    "createdBy",
    "updatedBy",
    "owner",
    "approver",
    "assignee",
    "projectManager",
    "accountManager",
    "legalReviewer",
    "projectType",
    "projectCode",
    "projectName",
    "projectPhase",
    "department",
    "division",
    "businessUnit",
    "status",
    "priority",
    "riskLevel",
    "complianceStatus",
    "value",
    "currency",
    "paymentTerms",
    "billingFrequency",
    "version",
    "template",
    "language",
    "jurisdiction",
    "accountNumber",
    "contractName",
    "priceList",
    "customerName",
]

FIELD_SYNONYMS = {
    "creator": "createdBy",
    "author": "createdBy",
    "created by": "createdBy",
    "expiration": "expirationDate",
    "expiry": "expirationDate",
    "expiry date": "expirationDate",
    "expires": "expirationDate",
    "effective": "effectiveDate",
    "start date": "effectiveDate",
    "created": "createdDate",
    "creation date": "createdDate",
    "date created": "createdDate",
    "updated": "updatedDate",
    "last modified": "updatedDate",
    "modified date": "updatedDate",
    "modifier": "updatedBy",
    "updated by": "updatedBy",
    "project": "projectType",
    "customer": "customerName",
    "account": "accountNumber",
    "price": "priceList",
    "name": "contractName",
}

BUSINESS_TERMS = [
    "contract",
    "contracts",
    "agreement",
    "agreements",
    "customer",
    "customers",
    "client",
    "clients",
    "account",
    "accounts",
    "number",
    "numbers",
    "price",
    "prices",
    "pricing",
    "date",
    "dates",
    "details",
    "detail",
    "information",
    "info",
    "status",
    "summary",
    "field",
    "fields",
    "user",
    "users",
    "owner",
    "creator",
    "author",
    "project",
    "projects",
    "expiration",
    "expiry",
    "expire",
    "expires",
    "expired",
    "expiring",
    "effective",
    "active",
    "inactive",
    "ongoing",
    "current",
    "terminated",
    "lapsed",
    "renewal",
    "value",
    "amount",
    "cost",
    "name",
    "named",
    "called",
    "created",
    "updated",
    "modified",
    "authored",
    "made",
]

ACTION_WORDS = [
    "show",
    "display",
    "view",
    "open",
    "get",
    "retrieve",
    "fetch",
    "list",
    "search",
    "find",
    "lookup",
    "look",
    "locate",
    "filter",
    "create",
    "make",
    "draft",
    "new",
    "add",
    "update",
    "modify",
    "change",
    "edit",
    "amend",
    "renew",
    "help",
    "guide",
    "steps",
    "explain",
    "instructions",
    "tell",
]

COMMON_WORDS = [
    "a",
    "an",
    "the",
    "all",
    "any",
    "every",
    "each",
    "me",
    "my",
    "i",
    "we",
    "our",
    "you",
    "your",
    "it",
    "its",
    "is",
    "are",
    "was",
    "be",
    "do",
    "does",
    "did",
    "can",
    "will",
    "should",
    "please",
    "for",
    "of",
    "to",
    "in",
    "on",
    "at",
    "by",
    "with",
    "from",
    "and",
    "or",
    "not",
    "about",
    "after",
    "before",
    "between",
    "since",
    "until",
    "through",
    "where",
    "when",
    "what",
    "which",
    "who",
    "how",
    "many",
    "this",
    "that",
    "these",
    "those",
    "up",
    "set",
    "walk",
    "process",
    "state",
    "end",
    "start",
    "running",
    "past",
    "due",
    "force",
    "containing",
    "year",
    "month",
    "have",
    "has",
    "kind",
    "kinds",
    "type",
    "types",
    "custom",
    "last",
    "latest",
]

MONTH_NAMES = [
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]

ABBREVIATIONS = {
    # contract
    "contarct": "contract",
    "contrct": "contract",
    "cntract": "contract",
    "kontrct": "contract",
    "contrst": "contract",
    "cntrct": "contract",
    "contrat": "contract",
    "contraxt": "contract",
    "contracs": "contracts",
    "contrcts": "contracts",
    # customer / account
    "custmr": "customer",
    "custmer": "customer",
    "customar": "customer",
    "custemer": "customer",
    "cust": "customer",
    "accnt": "account",
    "acnt": "account",
    "acount": "account",
    "accout": "account",
    "acct": "account",
    # actions
    "shw": "show",
    "shwo": "show",
    "sho": "show",
    "dsply": "display",
    "disply": "display",
    "lst": "list",
    "lsit": "list",
    "gt": "get",
    "retrive": "retrieve",
    "retreive": "retrieve",
    "fnd": "find",
    "serch": "search",
    "seach": "search",
    "crete": "create",
    "creat": "create",
    "updte": "update",
    "hlp": "help",
    # common words
    "detals": "details",
    "detils": "details",
    "dtls": "details",
    "numbr": "number",
    "nubmer": "number",
    "num": "number",
    "no": "number",
    "dat": "date",
    "effectiv": "effective",
    "expiraion": "expiration",
    "expirasion": "expiration",
    "exp": "expiration",
    "staus": "status",
    "statys": "status",
    "pls": "please",
    "plz": "please",
    "u": "you",
}


# =============================================================================
# REQUIRED FIELDS & ACTION DIRECTIVES
# =============================================================================

REQUIRED_FIELDS = {
    Intent.CREATE_CONTRACT: [
        "accountNumber",
        "contractName",
        "expirationDate",
        "customerName",
        "priceList",
    ],
    Intent.UPDATE_CONTRACT: ["contractNumber"],
}

ACTION_DIRECTIVES = {
    Intent.GET_CONTRACT_INFO: "show_contract_details",
    Intent.GET_CONTRACT_EXPIRATION: "show_expiration_date",
    Intent.LIST_EXPIRED_CONTRACTS: "display_contract_list",
    Intent.LIST_ACTIVE_CONTRACTS: "display_contract_list",
    Intent.LIST_CONTRACTS: "display_contract_list",
    Intent.FILTER_CONTRACTS_BY_CUSTOMER: "show_customer_filter_form",
    Intent.FILTER_CONTRACTS_BY_USER: "show_user_filter_form",
    Intent.SEARCH_CONTRACTS: "show_search_form",
    Intent.CONTRACT_STATUS: "show_contract_status",
    Intent.GUIDE_CONTRACT: "provide_guidance",
    Intent.UPDATE_CONTRACT: "show_update_form",
    Intent.UNKNOWN: "clarify_intent",
}
