"""
Normalization of raw inference responses.

Classification and summarization models answer with either a flat list
(``[{...}, ...]``) or a list nested one level deeper (``[[{...}, ...]]``).
``decode_response`` turns any parsed JSON value into a ``DecodedResponse``;
the extractors below read from that and never raise.

Only the first top-level element is inspected, and for the nested shape only
the first element of the inner list. Siblings are ignored even when they
carry a higher score.
"""

from typing import Any, Optional

from entry_analysis.models.inference_models import (
    DecodedResponse,
    LabelScore,
    RawInferenceResponse,
    ResponseShape,
)

ELLIPSIS = "..."


def decode_response(raw: RawInferenceResponse) -> DecodedResponse:
    """
    Classify a raw response and locate its candidate object.

    Examples:
        >>> decode_response([]).shape
        <ResponseShape.EMPTY: 'empty'>
        >>> decode_response([[{"label": "joy", "score": 0.9}]]).candidate
        {'label': 'joy', 'score': 0.9}
    """
    if not isinstance(raw, list):
        return DecodedResponse(ResponseShape.MALFORMED)
    if not raw:
        return DecodedResponse(ResponseShape.EMPTY)

    first = raw[0]
    if isinstance(first, list):
        candidate = first[0] if first else None
        if isinstance(candidate, dict):
            return DecodedResponse(ResponseShape.NESTED, candidate)
        return DecodedResponse(ResponseShape.MALFORMED)

    if isinstance(first, dict):
        return DecodedResponse(ResponseShape.FLAT, first)
    return DecodedResponse(ResponseShape.MALFORMED)


def _truthy_label(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def _truthy_score(value: Any) -> float:
    # bool is an int subclass; True is not a confidence
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value:
        return float(value)
    return 0.0


def extract_label_score(raw: RawInferenceResponse) -> LabelScore:
    """
    Extract the first (label, score) pair of a classification response.

    Returns ``LabelScore(label=None, score=0.0)`` for any shape without a
    candidate object. A missing or falsy ``label`` becomes None and a missing
    or falsy ``score`` becomes 0.0.
    """
    decoded = decode_response(raw)
    if decoded.candidate is None:
        return LabelScore()

    return LabelScore(
        label=_truthy_label(decoded.candidate.get("label")),
        score=_truthy_score(decoded.candidate.get("score")),
    )


def extract_summary_text(raw: RawInferenceResponse) -> str:
    """Return ``summary_text`` (or ``generated_text``) of the candidate, else ''."""
    decoded = decode_response(raw)
    if decoded.candidate is None:
        return ""

    for key in ("summary_text", "generated_text"):
        value = decoded.candidate.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


def fallback_summary(text: str, max_chars: int = 200) -> str:
    """
    Entry text cut to ``max_chars`` with a trailing ellipsis when longer.

    Length is counted in UTF-16 code units, so a character outside the Basic
    Multilingual Plane (most emoji) counts as two. A pair split by the cut
    is dropped.

    Examples:
        >>> fallback_summary("abcdef", max_chars=3)
        'abc...'
        >>> len(fallback_summary("\\U0001F600" * 3, max_chars=3))
        4
    """
    encoded = text.encode("utf-16-le", "surrogatepass")
    if len(encoded) > max_chars * 2:
        return encoded[: max_chars * 2].decode("utf-16-le", "ignore") + ELLIPSIS
    return text


def extract_summary(raw: RawInferenceResponse, original_text: str, max_chars: int = 200) -> str:
    """
    Summary text of a summarization response, or the truncated entry text.

    Args:
        raw: Parsed response of the summary model
        original_text: Entry text used when the response has no summary
        max_chars: Truncation limit for the fallback

    Returns:
        Non-empty summary for any non-empty ``original_text``
    """
    return extract_summary_text(raw) or fallback_summary(original_text, max_chars)
