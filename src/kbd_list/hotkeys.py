"""Key-binding service: routes key events to bound handlers.

Bindings carry ``KeyBindingOptions`` that control whether they fire:
enabled/disabled, scoping to active scopes, and suppression while a form
field has focus.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Union

from blessed.keyboard import Keystroke
from loguru import logger

FORM_TAGS = ("input", "textarea", "select")
WILDCARD_SCOPE = "*"


@dataclass
class KeyBindingOptions:
    """Options controlling when a binding fires."""

    enabled: bool = True
    scopes: tuple[str, ...] = ()  # Empty = fire in any scope
    enable_on_form_tags: Union[bool, tuple[str, ...]] = False
    prevent_default: bool = False

    def __post_init__(self) -> None:
        # Lists (e.g. from TOML or callers) behave like tuples
        self.scopes = tuple(self.scopes)
        if not isinstance(self.enable_on_form_tags, (bool, str)):
            self.enable_on_form_tags = tuple(
                str(tag).lower() for tag in self.enable_on_form_tags
            )

    def validate(self) -> None:
        """Validate option values.

        Raises:
            ValueError: If a form tag is not one of FORM_TAGS
        """
        if not isinstance(self.enable_on_form_tags, (bool, tuple)):
            raise ValueError(
                f"enable_on_form_tags must be a bool or a sequence of tags, "
                f"got {self.enable_on_form_tags!r}"
            )
        if isinstance(self.enable_on_form_tags, tuple):
            unknown = set(self.enable_on_form_tags) - set(FORM_TAGS)
            if unknown:
                raise ValueError(
                    f"Unknown form tags: {unknown}. Valid tags are: {FORM_TAGS}"
                )


@dataclass
class KeyEvent:
    """A key press delivered by the host."""

    key: Union[Keystroke, str]
    focused_tag: Optional[str] = None
    scope: Optional[str] = None  # Overrides the registry's active scopes
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


KeyHandler = Callable[[KeyEvent], None]


@dataclass(eq=False)
class Binding:
    """One handler bound to a set of key names."""

    keys: tuple[str, ...]
    handler: KeyHandler
    options: KeyBindingOptions = field(default_factory=KeyBindingOptions)
    registry: Optional["HotkeyRegistry"] = None

    def unbind(self) -> None:
        if self.registry is not None:
            self.registry.unbind(self)
            self.registry = None


def _key_names(key: Union[Keystroke, str]) -> set[str]:
    """Names a key event can match: the sequence name and the raw text."""
    names = {str(key)}
    name = getattr(key, "name", None)
    if name:
        names.add(name)
    return names


class HotkeyRegistry:
    """Dispatch table of key bindings with scope tracking."""

    def __init__(self, active_scopes: Iterable[str] = (WILDCARD_SCOPE,)):
        self.active_scopes: set[str] = set(active_scopes)
        self._bindings: list[Binding] = []

    def bind(
        self,
        keys: Iterable[str],
        handler: KeyHandler,
        options: Optional[KeyBindingOptions] = None,
    ) -> Binding:
        """Register handler for keys and return the binding."""
        options = options or KeyBindingOptions()
        options.validate()
        binding = Binding(
            keys=tuple(keys),
            handler=handler,
            options=options,
            registry=self,
        )
        self._bindings.append(binding)
        logger.debug(f"Bound {binding.keys} (scopes={options.scopes or 'any'})")
        return binding

    def unbind(self, binding: Binding) -> None:
        if binding in self._bindings:
            self._bindings.remove(binding)
            logger.debug(f"Unbound {binding.keys}")

    def enable_scope(self, scope: str) -> None:
        self.active_scopes.add(scope)

    def disable_scope(self, scope: str) -> None:
        self.active_scopes.discard(scope)

    def _scope_allows(
        self, options: KeyBindingOptions, event_scope: Optional[str] = None
    ) -> bool:
        if not options.scopes:
            return True
        if event_scope is not None:
            return event_scope == WILDCARD_SCOPE or event_scope in options.scopes
        if WILDCARD_SCOPE in self.active_scopes:
            return True
        return bool(self.active_scopes.intersection(options.scopes))

    @staticmethod
    def _focus_allows(options: KeyBindingOptions, focused_tag: Optional[str]) -> bool:
        if focused_tag is None or focused_tag.lower() not in FORM_TAGS:
            return True
        if options.enable_on_form_tags is True:
            return True
        if isinstance(options.enable_on_form_tags, tuple):
            return focused_tag.lower() in options.enable_on_form_tags
        return False

    def dispatch(self, event: KeyEvent) -> bool:
        """
        Invoke every binding matching the event.

        Returns:
            True if at least one handler ran
        """
        names = _key_names(event.key)
        handled = False
        for binding in list(self._bindings):
            options = binding.options
            if not names.intersection(binding.keys):
                continue
            if not options.enabled:
                continue
            if not self._scope_allows(options, event.scope):
                continue
            if not self._focus_allows(options, event.focused_tag):
                continue
            if options.prevent_default:
                event.prevent_default()
            binding.handler(event)
            handled = True
        return handled
