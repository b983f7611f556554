"""Rules deciding whether a registered listener matches one being removed."""

from __future__ import annotations

import functools
import inspect
from typing import Callable

from .config import MatchPolicy
from .events import Listener


ListenerMatcher = Callable[[Listener, Listener], bool]


def function_token(listener: Listener) -> object:
    """Return the object identifying the function behind ``listener``.

    Partials and bound methods are unwrapped, then Python functions are
    reduced to their code object. Every closure produced by one ``def`` or
    ``lambda`` shares a code object, so they all yield the same token, as do
    the bound methods of one function across different instances.
    """
    target: object = listener
    while True:
        if isinstance(target, functools.partial):
            target = target.func
        elif inspect.ismethod(target):
            target = target.__func__
        else:
            break
    code = getattr(target, "__code__", None)
    if inspect.iscode(code):
        return code
    return target


def match_function(candidate: Listener, listener: Listener) -> bool:
    token_a, token_b = function_token(candidate), function_token(listener)
    if token_a is token_b:
        return True
    if inspect.iscode(token_a) or inspect.iscode(token_b):
        return False
    # Builtin bound methods are rebuilt on each attribute access.
    return token_a == token_b


def match_identity(candidate: Listener, listener: Listener) -> bool:
    return candidate is listener or candidate == listener


_MATCHERS: dict[str, ListenerMatcher] = {
    "function": match_function,
    "identity": match_identity,
}


def get_matcher(policy: MatchPolicy) -> ListenerMatcher:
    try:
        return _MATCHERS[policy]
    except KeyError as exc:
        raise ValueError(f"Unsupported matching policy '{policy}'") from exc
