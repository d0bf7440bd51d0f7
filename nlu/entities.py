"""
Regex entity extraction.

Runs on the original query text (before typo correction) so identifiers and
names come through untouched. Every pattern is independent; a miss simply
leaves that key out of the result.
"""

import calendar
import re
from datetime import date, datetime
from typing import Callable, Dict, List, Optional, Tuple

from nlu.config import PipelineConfig
from nlu.schemas import DateRangeValue, Diagnostic, EntityValue, FieldList, TextValue
from utils.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# PATTERNS
# =============================================================================

CONTRACT_CUE = r"(?:contracts?|contrct|cntract|contarct|cntrct)"
ACCOUNT_CUE = r"(?:account|acount|accnt|acct|acc|customer|client)"
NUMBER_LABEL = r"(?:num(?:ber)?|no\.?|id|#)?"

CONTRACT_NUMBER = re.compile(
    rf"\b{CONTRACT_CUE}\s*{NUMBER_LABEL}\s*[:#]?\s*(\d{{6,8}})\b", re.I
)
BARE_NUMBER = re.compile(r"(?<![\w/$.-])#?(\d{6,8})(?![\w/-])")
ACCOUNT_NUMBER = re.compile(
    rf"\b{ACCOUNT_CUE}\s*{NUMBER_LABEL}\s*[:#]?\s*(\d{{6,8}})\b", re.I
)
ACCOUNT_CUE_BEFORE = re.compile(rf"\b{ACCOUNT_CUE}\s*{NUMBER_LABEL}\s*[:#]?\s*$", re.I)

NAME = r"[A-Za-z][\w&.'-]*"
CUSTOMER = re.compile(
    rf"\b(?:for|customer|client)\s+(?:(?:customer|client)\s+)?(?:name\s+)?(?:is\s+)?"
    rf"({NAME}(?:\s+{NAME})?)",
    re.I,
)
# "search for X" names what to look for, not who the customer is.
SEARCH_VERB_BEFORE = re.compile(
    r"\b(?:search|searching|find|finding|look|looking|hunt)\s+$", re.I
)
CREATOR = re.compile(
    rf"\b(?:created|authored|made|owned)\s+by\s+(?:user\s+)?({NAME}(?:\s+{NAME})?)",
    re.I,
)
CONTRACT_NAME_QUOTED = re.compile(
    r"\b(?:named?|called|titled)\s+[\"']([^\"']+)[\"']", re.I
)
CONTRACT_NAME = re.compile(r"\b(?:named?|called|titled)\s+([A-Za-z][\w-]*)", re.I)

PRICE_LIST = re.compile(
    r"\bprice\s*list\s+(?:is\s+|named\s+|of\s+)?([A-Za-z][\w-]*)", re.I
)
PRICE = re.compile(
    r"\b(?:price|cost|amount|value)\s*(?:list\s*)?(?:of|is|at|:|=)?\s*"
    r"(\$?\d+(?:,\d{3})*(?:\.\d{1,2})?)",
    re.I,
)

ISO_OR_US_DATE = r"(?:\d{4}-\d{1,2}-\d{1,2}|\d{1,2}/\d{1,2}/\d{4})"
EXPIRATION_DATE = re.compile(
    rf"\b(?:expir\w*|end(?:s|ing)?(?:\s+date)?|until)\s+(?:date\s+)?"
    rf"(?:is\s+|on\s+|of\s+|by\s+)?({ISO_OR_US_DATE})",
    re.I,
)

MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|"
    r"aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
    r"(?![a-z])"
)
NUMERIC_DATE = r"(?:\d{4}-\d{1,2}-\d{1,2}|\d{1,2}/\d{1,2}/\d{4}|\d{1,2}-[A-Za-z]{3}-\d{4})"
DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%d-%b-%Y")

NUMERIC_RANGE = re.compile(
    rf"\b(after|before|between|from|since|until)\s+({NUMERIC_DATE})"
    rf"(?:\s+(?:and|to|until|through|-)\s+({NUMERIC_DATE}))?",
    re.I,
)
MONTH_RANGE = re.compile(
    rf"\b(?:(?:from|after|since|between|before)\s+)?(?:(\d{{1,2}})\s+)?({MONTH})\.?"
    rf"(?:\s+(\d{{4}}|\d{{2}}))?\s*(?:to|until|through|and|-)\s*"
    rf"(?:(\d{{1,2}})\s+)?({MONTH})\.?(?:\s+(\d{{4}}|\d{{2}}))?\b",
    re.I,
)
OPEN_MONTH = re.compile(
    rf"\b(after|since|from|before|until)\s+(?:(\d{{1,2}})\s+)?({MONTH})\.?"
    rf"(?:\s+(\d{{4}}|\d{{2}}))?\b",
    re.I,
)
LOWER_BOUND_CUES = ("after", "since", "from", "between")

ALL_FIELDS = re.compile(
    r"\b(?:all\s+(?:the\s+)?fields|full\s+details|all\s+(?:the\s+)?details)\b", re.I
)
FIELD_REQUEST = re.compile(
    r"\b(?:show|get|list|display)\s+(?:me\s+)?(?:the\s+)?(.+?)\s+(?:for|of|where)\b",
    re.I,
)
FIELD_SEPARATOR = re.compile(r"\s*,\s*(?:and\s+)?|\s+and\s+|\s*&\s*")

INVERTED_RANGE = "End date cannot be before start date"
INVALID_DATE = "Invalid date format"


class DateRangeError(ValueError):
    pass


MONTH_PREFIXES = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)


def month_number(name: str) -> int:
    return MONTH_PREFIXES.index(name[:3].lower()) + 1


def resolve_year(raw: Optional[str], today: date) -> int:
    if not raw:
        return today.year
    if len(raw) == 2:
        return int("20" + raw)
    return int(raw)


def parse_date(raw: str) -> date:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    raise DateRangeError(INVALID_DATE)


def camel_case(text: str) -> str:
    words = text.split()
    if not words:
        return ""
    return words[0].lower() + "".join(w[:1].upper() + w[1:].lower() for w in words[1:])


class EntityExtractor:
    """Pulls contract entities out of a raw query."""

    def __init__(self, config: PipelineConfig, clock: Callable[[], date] = date.today):
        self.config = config
        self.clock = clock
        self._fields_by_key = {f.lower(): f for f in config.contract_fields}

    def extract(self, query: str) -> Dict[str, EntityValue]:
        entities: Dict[str, EntityValue] = {}
        if not query or not query.strip():
            return entities

        text_entities = [
            ("contractNumber", self.contract_number(query)),
            ("accountNumber", self.account_number(query)),
            ("customerName", self.customer_name(query)),
            ("contractName", self.contract_name(query)),
            ("createdBy", self.created_by(query)),
            ("priceList", self.price(query)),
            ("expirationDate", self.expiration_date(query)),
        ]
        for key, value in text_entities:
            if value:
                entities[key] = TextValue(value=value)

        entities.update(self.date_range(query))

        fields = self.requested_fields(query)
        if fields:
            entities["requestedFields"] = FieldList(values=tuple(fields))

        if entities:
            logger.debug(f"Extracted {sorted(entities)} from '{query}'")
        return entities

    # -------------------------------------------------------------------------
    # Identifiers
    # -------------------------------------------------------------------------

    def contract_number(self, query: str) -> Optional[str]:
        match = CONTRACT_NUMBER.search(query)
        if match:
            return match.group(1)
        for match in BARE_NUMBER.finditer(query):
            # Numbers introduced by an account/customer cue are account numbers.
            if ACCOUNT_CUE_BEFORE.search(query[: match.start()]):
                continue
            return match.group(1)
        return None

    def account_number(self, query: str) -> Optional[str]:
        match = ACCOUNT_NUMBER.search(query)
        return match.group(1) if match else None

    # -------------------------------------------------------------------------
    # Names
    # -------------------------------------------------------------------------

    def _is_vocabulary(self, word: str) -> bool:
        return self.config.in_dictionary(word.strip(".,'\"").lower())

    def _clean_name(self, captured: str) -> Optional[str]:
        words = captured.split()
        if not words or self._is_vocabulary(words[0]):
            return None
        while words and self._is_vocabulary(words[-1]):
            words.pop()
        return " ".join(words) or None

    def customer_name(self, query: str) -> Optional[str]:
        lowered = query.lower()
        for name in self.config.business_names:
            if re.search(rf"\b{re.escape(name)}\b", lowered):
                return name.upper()
        pos = 0
        while True:
            match = CUSTOMER.search(query, pos)
            if match is None:
                break
            if match.group(0)[:3].lower() == "for" and SEARCH_VERB_BEFORE.search(
                query[: match.start()]
            ):
                # "search for customer X" still names a customer after the cue.
                pos = match.start() + 3
                continue
            name = self._clean_name(match.group(1))
            if name:
                return name
            pos = match.end()
        return None

    def contract_name(self, query: str) -> Optional[str]:
        match = CONTRACT_NAME_QUOTED.search(query)
        if match:
            return match.group(1).strip()
        match = CONTRACT_NAME.search(query)
        if match and not self._is_vocabulary(match.group(1)):
            return match.group(1)
        return None

    def created_by(self, query: str) -> Optional[str]:
        match = CREATOR.search(query)
        return self._clean_name(match.group(1)) if match else None

    # -------------------------------------------------------------------------
    # Amounts and dates
    # -------------------------------------------------------------------------

    def price(self, query: str) -> Optional[str]:
        match = PRICE_LIST.search(query)
        if match and not self._is_vocabulary(match.group(1)):
            return match.group(1)
        match = PRICE.search(query)
        return match.group(1) if match else None

    def expiration_date(self, query: str) -> Optional[str]:
        match = EXPIRATION_DATE.search(query)
        return match.group(1) if match else None

    def date_range(self, query: str) -> Dict[str, EntityValue]:
        """dateRange and/or dateRangeError, or nothing when no range is mentioned."""
        try:
            bounds = self._parse_range(query)
        except DateRangeError as e:
            logger.debug(f"Date range rejected: {e}")
            return {"dateRangeError": Diagnostic(message=str(e))}
        if bounds is None:
            return {}

        start, end = bounds
        found: Dict[str, EntityValue] = {"dateRange": DateRangeValue(start=start, end=end)}
        if start and end and end < start:
            found["dateRangeError"] = Diagnostic(message=INVERTED_RANGE)
        return found

    def _parse_range(self, query: str) -> Optional[Tuple[Optional[date], Optional[date]]]:
        today = self.clock()

        match = NUMERIC_RANGE.search(query)
        if match:
            cue, first, second = match.groups()
            first_date = parse_date(first)
            if second:
                return first_date, parse_date(second)
            if cue.lower() in LOWER_BOUND_CUES:
                return first_date, None
            return None, first_date

        match = MONTH_RANGE.search(query)
        if match:
            start_day, start_month, start_year, end_day, end_month, end_year = match.groups()
            # A year given on one side applies to both.
            start_year = start_year or end_year
            end_year = end_year or start_year
            start =self._month_date(start_day, start_month, start_year, today, last=False)
            end = self._month_date(end_day, end_month, end_year, today, last=True)
            return start, end

        match = OPEN_MONTH.search(query)
        if match:
            cue, day, month, year = match.groups()
            if cue.lower() in LOWER_BOUND_CUES:
                return self._month_date(day, month, year, today, last=False), None
            return None, self._month_date(day, month, year, today, last=True)

        return None

    def _month_date(
        self,
        day: Optional[str],
        month: str,
        year: Optional[str],
        today: date,
        last: bool,
    ) -> date:
        year_number = resolve_year(year, today)
        month_index = month_number(month)
        if day:
            day_number = int(day)
        elif last:
            day_number = calendar.monthrange(year_number, month_index)[1]
        else:
            day_number = 1
        try:
            return date(year_number, month_index, day_number)
        except ValueError:
            raise DateRangeError(INVALID_DATE) from None

    # -------------------------------------------------------------------------
    # Requested fields
    # -------------------------------------------------------------------------

    def normalize_field(self, raw: str) -> Optional[str]:
        text = " ".join(raw.lower().split())
        text = re.sub(r"^(?:the|its)\s+", "", text)
        if not text:
            return None
        synonym = self.config.field_synonyms.get(text)
        if synonym:
            return synonym
        return self._fields_by_key.get(camel_case(text).lower())

    def requested_fields(self, query: str) -> List[str]:
        if ALL_FIELDS.search(query):
            return list(self.config.contract_fields)

        match = FIELD_REQUEST.search(query)
        if not match:
            return []

        fields = []
        for part in FIELD_SEPARATOR.split(match.group(1)):
            field = self.normalize_field(part)
            if field and field not in fields:
                fields.append(field)
        return fields
