"""
Report generators for manifest analysis results
"""

import csv
import io
import json
import sys
from typing import List, Optional, Sequence

from .models import NormalizedResult, ParseFailure, ParseOutcome


class BaseReporter:
    """Base class for reporters"""

    def report(self, outcomes: Sequence[ParseOutcome], output: Optional[str] = None) -> str:
        """Generate report and optionally write to file"""
        raise NotImplementedError

    def _write_output(self, content: str, output: Optional[str]) -> None:
        """Write content to file or stdout"""
        if output:
            with open(output, 'w', encoding='utf-8') as f:
                f.write(content)
        else:
            print(content)


class ConsoleReporter(BaseReporter):
    """Console/terminal output reporter with colors"""

    # ANSI color codes
    COLORS = {
        'error': '\033[91m',     # Red
        'format': '\033[96m',    # Cyan
        'muted': '\033[90m',     # Gray
        'reset': '\033[0m',
        'bold': '\033[1m',
        'green': '\033[92m',
    }

    def __init__(self, use_colors: bool = True, verbose: bool = False):
        self.use_colors = use_colors and sys.stdout.isatty()
        self.verbose = verbose

    def _color(self, text: str, color: str) -> str:
        """Apply color to text if colors enabled"""
        if not self.use_colors:
            return text
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def report(self, outcomes: Sequence[ParseOutcome], output: Optional[str] = None) -> str:
        """Generate console report"""
        lines: List[str] = []

        lines.append("")
        lines.append(self._color("=" * 60, 'bold'))
        lines.append(self._color("  MANIFEST ANALYSIS RESULTS", 'bold'))
        lines.append(self._color("=" * 60, 'bold'))

        failures = [o for o in outcomes if isinstance(o, ParseFailure)]

        for outcome in outcomes:
            lines.append("")
            if isinstance(outcome, NormalizedResult):
                header = f"{outcome.source or '<input>'} [{outcome.format.label}]"
                lines.append(self._color(header, 'format'))
                if not outcome.entries:
                    lines.append(self._color("  (no entries)", 'muted'))
                width = max((len(name) for name in outcome.entries), default=0)
                for name, value in outcome.entries.items():
                    lines.append(f"  {name:<{width}}  {value}")
            else:
                lines.append(self._color(f"{outcome.source or '<input>'} [{outcome.kind.value}]", 'error'))
                if self.verbose and outcome.message:
                    lines.append(f"  {outcome.message}")

        lines.append("")
        summary = f"{len(outcomes) - len(failures)} of {len(outcomes)} manifests analyzed"
        lines.append(self._color(summary, 'error' if failures else 'green'))
        lines.append(self._color("=" * 60, 'bold'))

        content = "\n".join(lines)
        self._write_output(content, output)
        return content


class CSVReporter(BaseReporter):
    """CSV format reporter, one row per entry"""

    COLUMNS = ['file', 'format', 'name', 'value', 'error']

    def report(self, outcomes: Sequence[ParseOutcome], output: Optional[str] = None) -> str:
        """Generate CSV report"""
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=self.COLUMNS)
        writer.writeheader()

        for outcome in outcomes:
            if isinstance(outcome, NormalizedResult):
                for name, value in outcome.entries.items():
                    writer.writerow({
                        'file': outcome.source,
                        'format': outcome.format.value,
                        'name': name,
                        'value': value,
                        'error': '',
                    })
            else:
                writer.writerow({
                    'file': outcome.source,
                    'format': '',
                    'name': '',
                    'value': '',
                    'error': outcome.kind.value,
                })

        content = buffer.getvalue()

        if output:
            with open(output, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
        else:
            print(content, end='')

        return content


class JSONReporter(BaseReporter):
    """JSON format reporter"""

    def report(self, outcomes: Sequence[ParseOutcome], output: Optional[str] = None) -> str:
        """Generate JSON report"""
        content = json.dumps([o.to_dict() for o in outcomes], indent=2)
        self._write_output(content, output)
        return content


def get_reporter(format: str, **kwargs) -> BaseReporter:
    """Factory function to get reporter by format"""
    reporters = {
        'console': ConsoleReporter,
        'csv': CSVReporter,
        'json': JSONReporter,
    }

    reporter_class = reporters.get(format.lower())
    if not reporter_class:
        raise ValueError(f"Unknown report format: {format}. Supported: {list(reporters.keys())}")

    return reporter_class(**kwargs)
