import json
import re
from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from interfaces.analysisModels import AnalyzedIngredient
from logger_manager import log_debug, log_warning
from services.errors import ParseFailure

CONTROL_CHARACTERS = re.compile(r"[\u0000-\u001F\u007F-\u009F]")
INGREDIENTS_KEY = '"ingredients":'

_ingredient_list = TypeAdapter(List[AnalyzedIngredient])


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of a single extraction strategy."""
    strategy: str
    ingredients: Optional[List[AnalyzedIngredient]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.ingredients is not None

    @classmethod
    def success(cls, strategy: str, ingredients: List[AnalyzedIngredient]) -> "ExtractionResult":
        return cls(strategy=strategy, ingredients=ingredients)

    @classmethod
    def failure(cls, strategy: str, error: str) -> "ExtractionResult":
        return cls(strategy=strategy, error=error)


def normalize_response(raw_text: str) -> str:
    """
    Strip characters that break a strict JSON parser.

    Newlines and carriage returns go first, then every C0/C1 control
    character. Nothing else is touched, so the result is idempotent.
    """
    cleaned = raw_text.replace("\n", "").replace("\r", "")
    return CONTROL_CHARACTERS.sub("", cleaned)


def validate_ingredients(strategy: str, entries: Any) -> ExtractionResult:
    """Validate upstream entries as a whole; one bad entry fails the lot."""
    if not isinstance(entries, list):
        return ExtractionResult.failure(strategy, f"ingredients is {type(entries).__name__}, expected list")
    try:
        return ExtractionResult.success(strategy, _ingredient_list.validate_python(entries))
    except ValidationError as e:
        return ExtractionResult.failure(strategy, f"invalid ingredient entry: {e.error_count()} error(s)")


def full_parse(text: str) -> ExtractionResult:
    try:
        document = json.loads(text)
    except (ValueError, RecursionError) as e:
        return ExtractionResult.failure("full_parse", str(e))

    if not isinstance(document, dict):
        return ExtractionResult.failure("full_parse", "top-level JSON is not an object")

    entries = document.get("ingredients")
    if entries is None:
        entries = []
    return validate_ingredients("full_parse", entries)


def find_ingredients_array(text: str) -> Optional[str]:
    """
    Locate the body of the ``"ingredients": [...]`` array.

    The scan is a single forward pass that respects strings and nesting.
    It stops at the bracket that closes the array. If the text ends first,
    the body is cut after the last complete element. Returns None when there
    is no array or a truncated one holds no complete element.
    """
    start = text.find(INGREDIENTS_KEY)
    while start != -1:
        pos = start + len(INGREDIENTS_KEY)
        while pos < len(text) and text[pos].isspace():
            pos += 1
        if pos < len(text) and text[pos] == "[":
            return _scan_array_body(text, pos + 1)
        start = text.find(INGREDIENTS_KEY, pos)
    return None


def _scan_array_body(text: str, begin: int) -> Optional[str]:
    depth = 0
    in_string = False
    escaped = False
    last_complete = None

    for i in range(begin, len(text)):
        char = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char in "{[":
            depth += 1
        elif char in "}]":
            if depth == 0:
                if char == "]":
                    return text[begin:i]
                continue
            depth -= 1
            if depth == 0:
                last_complete = i + 1

    # truncated upstream stream
    if last_complete is None:
        return None
    return text[begin:last_complete]


def partial_parse(text: str) -> ExtractionResult:
    body = find_ingredients_array(text)
    if body is None:
        return ExtractionResult.failure("partial_parse", "no ingredients array found")

    try:
        entries = json.loads(f"[{body}]")
    except (ValueError, RecursionError) as e:
        return ExtractionResult.failure("partial_parse", str(e))
    return validate_ingredients("partial_parse", entries)


# Tried in order, first success wins
EXTRACTION_STRATEGIES = (full_parse, partial_parse)


def extract_ingredients(text: str) -> List[AnalyzedIngredient]:
    """
    Recover analyzed ingredients from a normalized response string.

    Raises:
        ParseFailure: when no strategy succeeds.
    """
    errors = []
    for strategy in EXTRACTION_STRATEGIES:
        result = strategy(text)
        if result.ok:
            log_debug(f"{result.strategy} recovered {len(result.ingredients)} ingredients")
            return result.ingredients
        log_warning(f"{result.strategy} failed: {result.error}")
        errors.append(f"{result.strategy}: {result.error}")

    raise ParseFailure("Unable to parse ingredients data (" + "; ".join(errors) + ")")
