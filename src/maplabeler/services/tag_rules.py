"""Label tag rules: per-tag text transformations for tagged place names.

A project may define rules such as::

    {
        "to": [["([^a])a$", "$1laai⏹"], ["$", "laai"]],
        "q": [["$", "?"]]
    }

Rules of a tag are applied in order. Processing stops after a rule whose
result contains the stop marker ``⏹`` (the marker is removed). Rule files
are written for JavaScript ``String.replace``: find patterns may use named
groups and variable-width lookbehind, and replacements use ``$1``, ``$<name>``,
``$&`` and ``$$`` (plus the text before and after the match). The ``regex``
engine covers the pattern syntax; replacement tokens are expanded per match.
"""

import copy
from collections.abc import Mapping

import regex
from loguru import logger

from maplabeler.config.constants import DEFAULT_TAG_RULES, TAG_RULE_STOP

TAG_RULE_FLAGS = regex.V0

JS_REPLACEMENT_TOKEN = regex.compile(r"\$(\$|&|`|'|\d{1,2}|<[^>]*>)")


def expand_replacement(replacement: str, match: regex.Match) -> str:
    """Expand the ``$`` tokens of a replacement for one match.

    Tokens that do not refer to anything in the pattern stay literal, e.g.
    ``$2`` when the pattern has a single group, or ``$<x>`` when it has no
    named groups. ``$12`` with fewer than 12 groups means ``$1`` then ``2``.
    """
    group_count = match.re.groups
    group_names = match.re.groupindex

    def _expand(token_match: regex.Match) -> str:
        token = token_match.group(1)
        if token == "$":
            return "$"
        if token == "&":
            return match.group(0)
        if token == "`":
            return match.string[:match.start()]
        if token == "'":
            return match.string[match.end():]
        if token.startswith("<"):
            name = token[1:-1]
            if not group_names:
                return token_match.group(0)
            if name not in group_names:
                return ""
            return match.group(name) or ""
        if len(token) == 2 and 1 <= int(token) <= group_count:
            return match.group(int(token)) or ""
        if 1 <= int(token[0]) <= group_count:
            return (match.group(int(token[0])) or "") + token[1:]
        return token_match.group(0)

    return JS_REPLACEMENT_TOKEN.sub(_expand, replacement)


class LabelTagRules:
    """Tag-rule provider for the template resolver.

    Example:
        rules = LabelTagRules({"to": [["$", "-ward"]]})
        rules.apply_tag("to", "Jericho")  # "Jericho-ward"
        rules.apply_tag("q", "Jericho")   # "Jericho?" (default rule)
    """

    def __init__(self, rules: Mapping[str, list] | None = None):
        self.tag_rules: dict[str, list] = dict(rules or {})
        for tag, default_rules in DEFAULT_TAG_RULES.items():
            if tag not in self.tag_rules:
                self.tag_rules[tag] = copy.deepcopy(default_rules)
                logger.debug(f"Applied default rule for {tag!r} tag: {default_rules}")

    def has_rules_for_tag(self, tag: str) -> bool:
        return isinstance(self.tag_rules.get(tag), list)

    def defined_tags(self) -> list[str]:
        return list(self.tag_rules)

    def apply_tag(self, tag: str, text: str) -> str:
        """Apply the rules of ``tag`` to ``text``.

        Args:
            tag: Tag name, e.g. ``"to"``
            text: Place-name text to transform

        Returns:
            Transformed text; ``"tag#text"`` when the tag has no rules so the
            missing rule is visible on the label
        """
        rules = self.tag_rules.get(tag)
        if not isinstance(rules, list):
            return f"{tag}#{text}"

        result = text
        for i, rule in enumerate(rules):
            if not isinstance(rule, (list, tuple)) or len(rule) != 2:
                logger.warning(f"Skipping invalid rule {i} for tag {tag!r}: {rule!r}")
                continue

            find_pattern, replace_pattern = rule
            try:
                pattern = regex.compile(find_pattern, TAG_RULE_FLAGS)
                result = pattern.sub(
                    lambda match: expand_replacement(replace_pattern, match), result
                )
            except (regex.error, TypeError) as e:
                logger.warning(f"Error applying rule {i} for tag {tag!r}: {e}")
                continue

            if TAG_RULE_STOP in result:
                result = result.replace(TAG_RULE_STOP, "", 1)
                break

        return result
