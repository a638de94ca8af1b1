"""Why-key grammar: relationship domains and the roles declared for them.

A why key is a compact string the engine emits alongside a match, for
example ``ADDRESS+NAME(EMPLOYER:APPLICANT)``:

  - ``+`` or ``-`` separate domain tokens
  - ``(`` opens the role section of the preceding domain, starting with
    its INBOUND roles
  - ``,`` separates roles within one direction
  - ``:`` switches from INBOUND to OUTBOUND roles
  - ``)`` closes the role section

Every input parses to some result; there is no reject path. Domain
separators inside a role section are ordinary characters. Outside a
role section ``:`` and ``)`` discard the pending text, while ``,`` is an
ordinary character.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import reduce
from types import MappingProxyType
from typing import Mapping, NamedTuple

from match_explainer.core.types import RelationDirection

WhyKeyRoles = Mapping[str, Mapping[RelationDirection, tuple[str, ...]]]

DOMAIN_SEPARATORS = frozenset("+-")
ROLE_TERMINATORS = frozenset(":)")


class _Registration(NamedTuple):
    """A domain registration (no direction) or a role for a domain."""

    domain: str
    direction: RelationDirection | None = None
    role: str | None = None


@dataclass(frozen=True)
class _ParseState:
    buffer: str = ""
    domain: str | None = None  # set while inside a role section
    direction: RelationDirection | None = None
    registrations: tuple[_Registration, ...] = ()

    @property
    def in_roles(self) -> bool:
        return self.domain is not None


def _register_domain(text: str) -> tuple[_Registration, ...]:
    return (_Registration(text),) if text.strip() else ()


def _register_role(state: _ParseState, require_text: bool) -> tuple[_Registration, ...]:
    if require_text and not state.buffer.strip():
        return ()
    return (_Registration(state.domain, state.direction, state.buffer),)


def _step(state: _ParseState, char: str) -> _ParseState:
    if char in DOMAIN_SEPARATORS and not state.in_roles:
        return replace(
            state,
            buffer="",
            registrations=state.registrations + _register_domain(state.buffer),
        )

    if char == "(":
        return _ParseState(
            domain=state.buffer,
            direction=RelationDirection.INBOUND,
            registrations=state.registrations + _register_domain(state.buffer),
        )

    if state.in_roles:
        if char == ",":
            return replace(
                state,
                buffer="",
                registrations=state.registrations + _register_role(state, False),
            )
        if char == ":":
            return replace(
                state,
                buffer="",
                direction=RelationDirection.OUTBOUND,
                registrations=state.registrations + _register_role(state, True),
            )
        if char == ")":
            return _ParseState(
                registrations=state.registrations + _register_role(state, True),
            )
    elif char in ROLE_TERMINATORS:
        return replace(state, buffer="")

    return replace(state, buffer=state.buffer + char)


def _finish(state: _ParseState) -> tuple[_Registration, ...]:
    if state.in_roles:
        return state.registrations + _register_role(state, True)
    return state.registrations + _register_domain(state.buffer)


def parse_why_key(why_key: str | None) -> WhyKeyRoles:
    """Parse a why key into ``domain -> direction -> roles``.

    Domains keep their order of first appearance and roles keep their
    order of appearance without duplicates. A domain without a role
    section maps to an empty direction map. Registering a domain again
    resets the roles collected for it so far. Roles whose domain token
    was blank are dropped, so the empty string is never a domain key.
    """
    if why_key is None or not why_key.strip():
        return MappingProxyType({})

    registrations = _finish(reduce(_step, why_key, _ParseState()))

    domains: dict[str, dict[RelationDirection, dict[str, None]]] = {}
    for reg in registrations:
        if reg.direction is None:
            domains[reg.domain] = {}
            continue
        roles = domains.get(reg.domain)
        if roles is None:
            continue
        roles.setdefault(reg.direction, {})[reg.role] = None

    return MappingProxyType({
        domain: MappingProxyType({
            direction: tuple(role_set) for direction, role_set in roles.items()
        })
        for domain, roles in domains.items()
    })


def _join_roles(roles: tuple[str, ...]) -> str:
    text = ",".join(roles)
    # a trailing blank role only survives when a comma terminates it
    if roles and not roles[-1].strip():
        text += ","
    return text


def render_why_key(roles_by_domain: WhyKeyRoles) -> str:
    """Render a parsed why key back into its compact text form."""
    tokens: list[str] = []
    for domain, roles in roles_by_domain.items():
        inbound = roles.get(RelationDirection.INBOUND, ())
        outbound = roles.get(RelationDirection.OUTBOUND, ())
        if not inbound and not outbound:
            tokens.append(domain)
            continue
        section = _join_roles(inbound)
        if outbound:
            section += ":" + _join_roles(outbound)
        tokens.append(f"{domain}({section})")
    return "+".join(tokens)
