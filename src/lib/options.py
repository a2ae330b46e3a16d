"""
Option registry for modeline directives

Maps directive names and aliases to OptionSpec entries. Lookup is linear
and ordered: the first entry whose name or alias matches wins, so the
order options are registered in is significant.
"""

from typing import Any, List, Optional

from ..models.options import ArgShape, OptionSpec
from ..models.document import IndentMode
from .log import LOG


class OptionRegistryError(ValueError):
    """Raised when an option is registered under a name already in use"""
    pass


def expandTab_set(target: Any, enabled: bool) -> None:
    """Indent with spaces (True) or tabs (False)"""
    LOG(f"opt_expand_tab: {enabled}", level=3)
    target.indentMode_set(IndentMode.SPACES if enabled else IndentMode.TABS)


def tabStop_set(target: Any, width: int) -> None:
    """Set the indent/tab width; the adapter keeps the indent mode as is"""
    LOG(f"opt_tab_stop: {width}", level=3)
    target.indentWidth_set(width)


def wrap_set(target: Any, enabled: bool) -> None:
    """Turn line wrapping on or off"""
    LOG(f"opt_wrap: {enabled}", level=3)
    target.lineWrapping_set(enabled)


def encoding_set(target: Any, name: str) -> None:
    """Set the document text encoding"""
    LOG(f'opt_enc: "{name}"', level=3)
    target.encoding_set(name)


class OptionRegistry:
    """
    Registry of modeline option specifications

    Holds OptionSpec entries in declaration order and resolves directive
    keys against them, case-insensitively, by name or alias.
    """

    def __init__(self) -> None:
        """Initialize the registry and register all built-in options"""
        self.specs: List[OptionSpec] = []
        self.indentOptions_register()
        self.wrapOptions_register()
        self.encodingOptions_register()

    def register(self, spec: OptionSpec) -> None:
        """
        Append an option specification

        Raises:
            OptionRegistryError: If another option already uses spec.name
        """
        for existing in self.specs:
            if existing.name.lower() == spec.name.lower():
                raise OptionRegistryError(f"Option '{spec.name}' is already registered")
        self.specs.append(spec)

    def lookup(self, key: str) -> Optional[OptionSpec]:
        """
        Resolve a directive key to its option specification

        Args:
            key: Key text from a modeline token (any case)

        Returns:
            First spec whose name or alias equals key, or None
        """
        for spec in self.specs:
            if spec.matches(key):
                return spec
        return None

    def options_list(self) -> List[OptionSpec]:
        """Get all options in declaration order"""
        return list(self.specs)

    def indentOptions_register(self) -> None:
        """Register indentation options"""
        self.register(OptionSpec(
            name='expandtab',
            alias='et',
            arg_shape=ArgShape.FLAG_TRUE,
            setter=expandTab_set,
            description='Indent with spaces',
        ))

        self.register(OptionSpec(
            name='noexpandtab',
            arg_shape=ArgShape.FLAG_FALSE,
            setter=expandTab_set,
            description='Indent with tabs',
        ))

        width_specs = [
            ('tabstop', 'ts', 'Tab width'),
            ('softtabstop', 'sts', 'Indent width (soft tab stop)'),
            ('shiftwidth', 'sw', 'Indent width (shift width)'),
        ]

        for name, alias, desc in width_specs:
            self.register(OptionSpec(
                name=name,
                alias=alias,
                arg_shape=ArgShape.INTEGER,
                setter=tabStop_set,
                description=desc,
            ))

    def wrapOptions_register(self) -> None:
        """Register line wrapping options"""
        self.register(OptionSpec(
            name='wrap',
            arg_shape=ArgShape.FLAG_TRUE,
            setter=wrap_set,
            description='Wrap long lines at word boundaries',
        ))

        self.register(OptionSpec(
            name='nowrap',
            arg_shape=ArgShape.FLAG_FALSE,
            setter=wrap_set,
            description='Do not wrap long lines',
        ))

    def encodingOptions_register(self) -> None:
        """Register text encoding options"""
        self.register(OptionSpec(
            name='fileencoding',
            alias='encoding',
            arg_shape=ArgShape.STRING,
            setter=encoding_set,
            description='Character encoding of the file',
        ))
