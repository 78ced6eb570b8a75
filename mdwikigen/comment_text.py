"""Text rewrite rules applied to summary and remarks markup."""

import re
from collections.abc import Callable
from dataclasses import dataclass

from mdwikigen.cross_reference import resolve_cref

NBSP_TAB = "&nbsp;&nbsp;&nbsp;&nbsp;"


@dataclass(frozen=True)
class RewriteRule:
    """A single pattern -> replacement rewrite."""

    name: str
    pattern: re.Pattern[str]
    replacement: str | Callable[[re.Match[str]], str]

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


PARA_RULE = RewriteRule("para", re.compile(r"<para\s*/>"), "<br />")
NEWLINE_RULE = RewriteRule("newline", re.compile(r"\r?\n"), "<br />")
TAB_RULE = RewriteRule("tab", re.compile(r"\t|\\t"), NBSP_TAB)
PARAMREF_RULE = RewriteRule(
    "paramref",
    re.compile(r'<(?:type)?paramref name="([^"]*)"\s*/>'),
    lambda m: f"`{m.group(1)}`",
)


def see_cref_rule(namespace_match: str | None) -> RewriteRule:
    """Build the <see cref="T:Name" /> rule for a documented namespace."""
    return RewriteRule(
        "see-cref",
        re.compile(r'<see cref="\w:([^"]*)"\s*/>'),
        lambda m: resolve_cref(m.group(1), namespace_match),
    )


def comment_text_rules(namespace_match: str | None) -> list[RewriteRule]:
    """Return the ordered rewrite rules for summary/remarks text."""
    return [
        PARA_RULE,
        NEWLINE_RULE,
        TAB_RULE,
        see_cref_rule(namespace_match),
        PARAMREF_RULE,
    ]


def normalize_comment_text(text: str, rules: list[RewriteRule]) -> str:
    """Apply the rewrite rules in order to trimmed text."""
    text = text.strip()
    for rule in rules:
        text = rule.apply(text)
    return text.strip()
