"""
Modelfile Parser — Extracts TEMPLATE, SYSTEM and PARAMETER directives.

Scans the Modelfile line by line. TEMPLATE and SYSTEM each own a
capture sub-machine (idle / triple-quoted / double-quoted) so their
values may span several lines. PARAMETER lines are collected outside
any capture, keeping repeated names (e.g. several stop sequences) in
the order they appear.

Parsing never fails: unknown lines are ignored and an unterminated
value keeps whatever was captured before end of input.
"""

from dataclasses import dataclass, field

from lmbridge.modelfile.models import ParsedModelfile
from lmbridge.observability.diagnostics import DiagnosticSink, emit
from lmbridge.vocabulary import CaptureState, Directive, DiagnosticCode


TRIPLE_QUOTE = '"""'
DOUBLE_QUOTE = '"'


@dataclass
class DirectiveCapture:
    """
    Capture sub-machine for one quoted directive (TEMPLATE or SYSTEM).

    Opening lines are trimmed; continuation and closing lines are kept
    verbatim. The closing line loses its trailing whitespace and quote.
    """
    directive: Directive
    state: CaptureState = CaptureState.IDLE
    lines: list[str] = field(default_factory=list)
    inline_value: str = ""

    @property
    def capturing(self) -> bool:
        return self.state is not CaptureState.IDLE

    def matches(self, trimmed: str) -> bool:
        """Whether trimmed opens this directive while idle."""
        return not self.capturing and trimmed.startswith(self.directive.value)

    def open(self, trimmed: str) -> None:
        """Handle the directive's opening line."""
        keyword = f"{self.directive.value} "

        if TRIPLE_QUOTE in trimmed:
            content = trimmed.removeprefix(keyword).strip()
            content = content.removeprefix(TRIPLE_QUOTE)

            if content.endswith(TRIPLE_QUOTE):
                # """value""" on one line
                self.inline_value = content.removesuffix(TRIPLE_QUOTE)
                return

            self.state = CaptureState.TRIPLE_QUOTED
            if content:
                self.lines.append(content)

        elif trimmed.startswith(keyword + DOUBLE_QUOTE):
            content = trimmed.removeprefix(keyword).strip()
            content = content.removeprefix(DOUBLE_QUOTE)

            if content.endswith(DOUBLE_QUOTE):
                # Closed on the same line
                self.inline_value = content.removesuffix(DOUBLE_QUOTE)
            else:
                self.state = CaptureState.DOUBLE_QUOTED
                if content:
                    self.lines.append(content)

        # Unquoted values are not supported and are skipped

    def feed(self, line: str, trimmed: str) -> None:
        """Handle a line while capturing."""
        if self.state is CaptureState.TRIPLE_QUOTED and trimmed.endswith(TRIPLE_QUOTE):
            self._close(line.rstrip().removesuffix(TRIPLE_QUOTE))
        elif self.state is CaptureState.DOUBLE_QUOTED and trimmed.endswith(DOUBLE_QUOTE):
            self._close(line.rstrip().removesuffix(DOUBLE_QUOTE))
        else:
            self.lines.append(line)

    def _close(self, last_line: str) -> None:
        if last_line:
            self.lines.append(last_line)
        self.state = CaptureState.IDLE

    def value(self) -> str:
        """Captured multi-line value, falling back to the single-line one."""
        if self.lines:
            return "\n".join(self.lines)
        return self.inline_value


def _parse_parameter(trimmed: str) -> tuple[str, str] | None:
    """Split 'PARAMETER <name> <value>' into (name, unquoted value)."""
    rest = trimmed.removeprefix(f"{Directive.PARAMETER.value} ")
    parts = rest.split(" ", 1)
    if len(parts) != 2:
        return None
    name, value = parts
    return name, value.strip(DOUBLE_QUOTE)


def parse_modelfile(
    content: str,
    on_diagnostic: DiagnosticSink | None = None,
) -> ParsedModelfile:
    """
    Parse Modelfile text into its template, system prompt and parameters.

    TEMPLATE is checked before SYSTEM on every line, and PARAMETER lines
    are only recognised while neither value is being captured.
    """
    if not content:
        return ParsedModelfile.empty()

    template = DirectiveCapture(Directive.TEMPLATE)
    system = DirectiveCapture(Directive.SYSTEM)
    parameters: dict[str, list[str]] = {}

    for line in content.replace("\r\n", "\n").split("\n"):
        trimmed = line.strip()

        if template.matches(trimmed):
            template.open(trimmed)
        elif template.capturing:
            template.feed(line, trimmed)
        elif system.matches(trimmed):
            system.open(trimmed)
        elif system.capturing:
            system.feed(line, trimmed)
        elif trimmed.startswith(f"{Directive.PARAMETER.value} "):
            parsed = _parse_parameter(trimmed)
            if parsed is not None:
                name, value = parsed
                parameters.setdefault(name, []).append(value)

    for capture in (template, system):
        if capture.capturing:
            emit(
                on_diagnostic,
                DiagnosticCode.UNTERMINATED_DIRECTIVE,
                f"{capture.directive.value} value was not closed before end of input",
                directive=capture.directive.value,
                state=capture.state.value,
                captured_lines=len(capture.lines),
            )

    return ParsedModelfile(
        template=template.value(),
        system=system.value(),
        parameters=parameters,
    )
