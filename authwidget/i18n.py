from __future__ import annotations

from typing import Any, Iterable


def to_lower(values: Iterable[Any]) -> list[Any]:
    return [v.lower() if isinstance(v, str) else v for v in values]


def expand_languages(languages: Iterable[str]) -> list[str]:
    """
    Expand locale tags into a fallback search order, most specific first.

    ["de-DE-bavarian", "en"] -> ["de-DE-bavarian", "de-DE", "de", "en"]
    Each tag is kept only at its first position.
    """
    expanded: list[str] = []
    for lang in languages:
        parts = lang.split("-")
        expanded.append(lang)
        for n in range(len(parts) - 1, 0, -1):
            expanded.append("-".join(parts[:n]))
    return list(dict.fromkeys(expanded))


def parse_accept_language(header: str | None) -> list[str]:
    """
    Parse an Accept-Language header into tags ordered by preference.

    Wildcards and q=0 entries are dropped; ties keep header order.
    """
    ranked: list[tuple[float, int, str]] = []
    for idx, item in enumerate((header or "").split(",")):
        tag, _, params = item.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        q = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key.strip().lower() != "q":
                continue
            try:
                q = float(value)
            except ValueError:
                q = 1.0
        if q <= 0:
            continue
        ranked.append((-q, idx, tag))
    return [tag for _q, _idx, tag in sorted(ranked)]
