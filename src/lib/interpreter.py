"""
Directive interpreter

Resolves modeline tokens against the OptionRegistry and dispatches the
matched option setters against a document.

Resolution is best-effort: empty, malformed and unknown tokens, and value
options given without a value, are skipped without error. A caller that
wants to know what was skipped can pass an on_skip hook, which receives a
SkippedDirective for each ignored token.

Example:
    >>> interpreter = DirectiveInterpreter()
    >>> [a.spec.name for a in interpreter.line_resolve("# vim: et ts=4 bogus")]
    ['expandtab', 'tabstop']
"""

from typing import Any, Callable, List, Optional

from ..models.options import ArgShape
from ..models.directives import DirectiveApplication, SkippedDirective, SkipReason
from .options import OptionRegistry
from .tokenizer import tokenize, token_parse, integer_parse
from .log import LOG


SkipHook = Callable[[SkippedDirective], None]


class DirectiveInterpreter:
    """
    Table-driven interpreter for modeline directives

    Attributes:
        registry: OptionRegistry used to resolve keys
        on_skip: Optional diagnostic hook for ignored tokens
        delimiters: Token separators (None means appsettings default)
    """

    def __init__(
        self,
        registry: Optional[OptionRegistry] = None,
        on_skip: Optional[SkipHook] = None,
        delimiters: Optional[str] = None,
    ):
        if registry is None:
            registry = OptionRegistry()
        self.registry = registry
        self.on_skip = on_skip
        self.delimiters = delimiters

    def skip_report(self, token: str, reason: SkipReason, key: Optional[str] = None) -> None:
        """Notify the diagnostic hook, if any, that a token was ignored"""
        LOG(f"skip [{token}]: {reason.value}", level=3)
        if self.on_skip is not None:
            self.on_skip(SkippedDirective(token=token, reason=reason, key=key))

    def token_resolve(self, token: str) -> Optional[DirectiveApplication]:
        """
        Resolve one token into a directive application

        Args:
            token: A single token, e.g. "ts=4" or "et"

        Returns:
            DirectiveApplication, or None if the token is skipped
        """
        if not token:
            self.skip_report(token, SkipReason.EMPTY)
            return None

        parsed = token_parse(token)
        if parsed is None:
            self.skip_report(token, SkipReason.MALFORMED)
            return None

        spec = self.registry.lookup(parsed.key)
        if spec is None:
            self.skip_report(token, SkipReason.UNKNOWN_KEY, parsed.key)
            return None

        # Flags ignore any value text; value shapes need one
        if spec.arg_shape is ArgShape.FLAG_TRUE:
            value: Any = True
        elif spec.arg_shape is ArgShape.FLAG_FALSE:
            value = False
        elif parsed.value is None:
            self.skip_report(token, SkipReason.MISSING_VALUE, parsed.key)
            return None
        elif spec.arg_shape is ArgShape.INTEGER:
            value = integer_parse(parsed.value)
        else:
            value = parsed.value.strip()

        return DirectiveApplication(spec=spec, value=value, token=token)

    def line_resolve(self, line: str) -> List[DirectiveApplication]:
        """
        Resolve every directive on a modeline without applying anything

        Token 0 (the comment sign) is never interpreted.

        Args:
            line: Full modeline text

        Returns:
            Directive applications in left-to-right order
        """
        LOG(f"modeline [{line}]", level=3)

        applications: List[DirectiveApplication] = []
        for token in tokenize(line, self.delimiters)[1:]:
            application = self.token_resolve(token)
            if application is not None:
                applications.append(application)
        return applications

    def token_interpret(self, target: Any, token: str) -> None:
        """
        Resolve one token and, if it resolves, invoke its setter

        Args:
            target: DocumentAdapter the setter mutates
            token: A single token
        """
        LOG(f"interpret [{token}]", level=3)
        application = self.token_resolve(token)
        if application is not None:
            application.apply(target)

    def line_interpret(self, target: Any, line: str) -> List[DirectiveApplication]:
        """
        Resolve a modeline and apply its directives in order

        Later directives overwrite earlier ones ("et noexpandtab" leaves
        tabs).

        Returns:
            The applications that were invoked
        """
        applications = self.line_resolve(line)
        for application in applications:
            application.apply(target)
        return applications
