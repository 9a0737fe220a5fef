"""Console log sink used as the log callback by the command-line entry point."""

import sys
from datetime import datetime


class ConsoleLogger:
    """Callable log sink: stdout/stderr, optionally mirrored to a log file."""

    def __init__(self, log_level='INFO', log_file=None, stream=None, err_stream=None):
        self.log_level = log_level
        self.log_file = log_file
        self.stream = stream if stream is not None else sys.stdout
        self.err_stream = err_stream if err_stream is not None else sys.stderr

    def _format_log_entry(self, message, error=False, info=False, warning=False, debug=False, success=False):
        """Format log entry with timestamp and level prefix.

        Returns:
            tuple: (formatted_entry: str, tag: str)
        """
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        if error:
            prefix, tag = 'ERROR: ', 'error'
        elif warning:
            prefix, tag = 'WARN: ', 'warning'
        elif info:
            prefix, tag = 'INFO: ', 'info'
        elif debug:
            prefix, tag = 'DEBUG: ', 'debug'
        elif success:
            prefix, tag = '', 'success'
        else:
            prefix, tag = '', 'normal'

        log_entry = f"[{timestamp}] {prefix}{message}\n"
        return (log_entry, tag)

    def _write_log_to_file(self, log_entry):
        if not self.log_file:
            return
        with open(self.log_file, 'a', encoding='utf-8') as f:
            f.write(log_entry)

    def __call__(self, message, error=False, info=False, warning=False, debug=False, success=False):
        if debug and self.log_level != 'DEBUG':
            return

        log_entry, tag = self._format_log_entry(message, error=error, info=info, warning=warning,
                                                debug=debug, success=success)
        self._write_log_to_file(log_entry)

        out = self.err_stream if tag in ('error', 'warning') else self.stream
        out.write(log_entry)
        out.flush()
