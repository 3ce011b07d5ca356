"""Parser for textual spec expressions, used by the command line."""

import re
from typing import List

from ..types.constructs import Any, AnyOf, ArrayOf, ObjectOf, Optional
from ..types.spec import NativeKind, TypeSpec, duck


class SpecParser:
    """
    Parser for spec expressions.

    Formats:
        - "Number", "String", "Boolean", "Object", "Array", "Function", "Any"
        - "ArrayOf[String]", "ObjectOf[Boolean]", "Optional[Number]"
        - "AnyOf[Number, String]" or "Number | String"
        - "{x: Number, info: {color: String}}"
    """

    KINDS = {kind.name: kind for kind in NativeKind}

    COMBINATORS = {
        'AnyOf': None,
        'ArrayOf': 1,
        'ObjectOf': 1,
        'Optional': 1,
    }

    FIELD_NAME = re.compile(r'[A-Za-z_][\w-]*$')

    def parse(self, text: str) -> TypeSpec:
        text = text.strip()
        if not text:
            raise ValueError("Empty spec expression")

        # Union shorthand: "Number | String"
        alternatives = self._split(text, '|')
        if len(alternatives) > 1:
            return AnyOf(*(self.parse(alt) for alt in alternatives))

        # Duck record: "{name: Spec, ...}"
        if text.startswith('{'):
            if not text.endswith('}'):
                raise ValueError(f"Unterminated record: {text}")
            return self._parse_record(text[1:-1])

        # Combinator: "ArrayOf[String]"
        combinator_match = re.match(r'(\w+)\[(.*)\]$', text, re.DOTALL)
        if combinator_match:
            return self._parse_combinator(combinator_match.group(1), combinator_match.group(2))

        if text == 'Any':
            return Any
        if text in self.KINDS:
            return self.KINDS[text]

        raise ValueError(f"Unknown spec: {text}")

    def _parse_combinator(self, name: str, args_str: str) -> TypeSpec:
        if name not in self.COMBINATORS:
            raise ValueError(f"Unknown combinator: {name}")

        args = [self.parse(arg) for arg in self._split(args_str, ',') if arg.strip()]
        arity = self.COMBINATORS[name]
        if not args or (arity is not None and len(args) != arity):
            expected = "at least 1" if arity is None else str(arity)
            raise ValueError(f"{name} takes {expected} argument(s), got {len(args)}")

        if name == 'AnyOf':
            return AnyOf(*args)
        if name == 'ArrayOf':
            return ArrayOf(args[0])
        if name == 'ObjectOf':
            return ObjectOf(args[0])
        return Optional(args[0])

    def _parse_record(self, body: str) -> TypeSpec:
        fields = []
        seen = set()
        for entry in self._split(body, ','):
            if not entry.strip():
                continue
            if ':' not in entry:
                raise ValueError(f"Record field missing ':': {entry.strip()}")
            name, spec_str = entry.split(':', 1)
            name = name.strip().strip('"\'')
            if not self.FIELD_NAME.match(name):
                raise ValueError(f"Invalid field name: {name!r}")
            if name in seen:
                raise ValueError(f"Duplicate field: {name}")
            seen.add(name)
            fields.append((name, self.parse(spec_str)))
        return duck(fields)

    def _split(self, text: str, separator: str) -> List[str]:
        """Split on ``separator`` at bracket depth zero."""
        parts = []
        current = ""
        depth = 0

        for char in text:
            if char in '[({':
                depth += 1
                current += char
            elif char in '])}':
                depth -= 1
                if depth < 0:
                    raise ValueError(f"Unbalanced brackets in: {text}")
                current += char
            elif char == separator and depth == 0:
                parts.append(current)
                current = ""
            else:
                current += char

        if depth != 0:
            raise ValueError(f"Unbalanced brackets in: {text}")
        parts.append(current)
        return parts


# Singleton parser instance
_parser = SpecParser()


def parse_spec(text: str) -> TypeSpec:
    """Parse a spec expression string."""
    return _parser.parse(text)
