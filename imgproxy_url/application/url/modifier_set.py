from __future__ import annotations

from typing import Dict, Iterator, NamedTuple, Optional, Tuple


class ModifierToken(NamedTuple):
    name: str
    text: str


class ModifierSet:
    """Ordered mapping of modifier name -> serialized path segment.

    Order is observable (it changes the URL and therefore the signature):
    - replacing an existing name keeps its original position
    - removing a name and adding it again places it at the end
    """

    def __init__(self, tokens: Optional[Dict[str, str]] = None) -> None:
        # dict keeps the first insertion position when a key is reassigned
        self._tokens: Dict[str, str] = dict(tokens or {})

    def set(self, name: str, text: str) -> None:
        self._tokens[name] = text

    def unset(self, name: str) -> None:
        self._tokens.pop(name, None)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._tokens.get(name, default)

    def values(self) -> Tuple[str, ...]:
        return tuple(self._tokens.values())

    def tokens(self) -> Tuple[ModifierToken, ...]:
        return tuple(ModifierToken(n, t) for n, t in self._tokens.items())

    def copy(self) -> "ModifierSet":
        return ModifierSet(self._tokens)

    def __contains__(self, name: object) -> bool:
        return name in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._tokens))

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"ModifierSet({list(self._tokens.items())!r})"
