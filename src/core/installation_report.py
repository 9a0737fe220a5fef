"""
Provisioning progress tracking and reporting.
"""

import time
from datetime import datetime

from utils.symbols import LogSymbols


class InstallationReport:
    """Tracks which provisioning steps completed and which one failed."""

    def __init__(self):
        self.errors = []
        self.installed = []
        self.start_time = time.time()

    def add_error(self, step_name, error_msg):
        """Record a failed step."""
        self.errors.append({
            'step': step_name,
            'error': error_msg,
            'timestamp': datetime.now().strftime('%H:%M:%S')
        })

    def add_installed(self, step_name):
        self.installed.append({'step': step_name})

    def get_duration(self):
        """Get provisioning duration in seconds."""
        return time.time() - self.start_time

    def generate_summary(self):
        """Generate a formatted summary report."""
        duration = self.get_duration()
        minutes, seconds = divmod(int(duration), 60)
        title = "Provisioning Failed" if self.errors else "Provisioning Complete"

        summary = [
            "\n" + LogSymbols.SEPARATOR * 60,
            f"{LogSymbols.ERROR if self.errors else LogSymbols.SUCCESS} {title} ({minutes}m {seconds}s)",
            LogSymbols.SEPARATOR * 60,
            f"{LogSymbols.SUCCESS} {len(self.installed)} installed | {LogSymbols.ERROR} {len(self.errors)} errors"
        ]

        if self.installed:
            summary.append("\nInstalled:")
            for item in self.installed:
                summary.append(f"  {LogSymbols.SUCCESS} {item['step']}")

        if self.errors:
            summary.append("\nErrors:")
            for item in self.errors:
                summary.append(f"  {LogSymbols.ERROR} {item['step']}: {item['error']}")

        return "\n".join(summary)

    def has_errors(self):
        return len(self.errors) > 0
