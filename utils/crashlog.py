# utils/crashlog.py
import os, sys, faulthandler, datetime, logging, traceback
from typing import Dict

_fault_file = None
_context: Dict[str, str] = {}  # what the current run renders, copied into every report

def log_dir() -> str:
    d = os.path.join(os.getcwd(), "logs")
    os.makedirs(d, exist_ok=True)
    return d

def _report_path(kind: str) -> str:
    stamp = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")
    return os.path.join(log_dir(), f"{kind}-{stamp}.txt")

def set_context(**fields):
    """Remember run settings (output path, score source...) for later crash/error reports."""
    _context.clear()
    _context.update({k: str(v) for k, v in fields.items() if v is not None})

def _write_report(path: str, header: str, exc_type, exc, tb):
    with open(path, "w", encoding="utf-8") as out:
        out.write(header + "\n")
        for k in sorted(_context):
            out.write(f"  {k} = {_context[k]}\n")
        out.write("-" * 60 + "\n")
        out.write("".join(traceback.format_exception(exc_type, exc, tb)))

def setup_crashlog():
    """Send native faults and uncaught exceptions to logs/native-*.txt and logs/crash-*.txt."""
    global _fault_file
    try:
        if _fault_file is None:
            _fault_file = open(_report_path("native"), "w", encoding="utf-8")
        faulthandler.enable(_fault_file)
    except OSError:
        _fault_file = None

    def _on_uncaught(exc_type, exc, tb):
        logging.critical("Uncaught %s while rendering %s", exc_type.__name__,
                         _context.get("out", "?"), exc_info=(exc_type, exc, tb))
        try:
            _write_report(_report_path("crash"), f"UNCAUGHT {exc_type.__name__}", exc_type, exc, tb)
        finally:
            sys.__excepthook__(exc_type, exc, tb)
    sys.excepthook = _on_uncaught

def log_exception(title: str, exc: BaseException) -> str:
    path = _report_path("error")
    _write_report(path, f"[{title}] {type(exc).__name__}: {exc}", type(exc), exc, exc.__traceback__)
    return path
