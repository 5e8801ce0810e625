"""
Minimal interactive CLI entrypoint for the area-check pipeline.

Architectural role:
- Provides a terminal-only interface over the core pipeline.
- Runs every check in one local session held by a private history store.

Request lifecycle (per line):
1. Read a single line from stdin.
2. Handle local control commands (`exit`/`quit`, `history`, `clear`).
3. Split other input into `x y scale` and forward it to `run_check`.
4. Print the verdict and the current history size.

Input validation behavior:
- Empty input is ignored.
- Lines without exactly three fields are reported and skipped.
- Pipeline validation errors are printed, never raised.

Error handling strategy:
- Handles EOF and keyboard interrupts without traceback output.
"""

import json
import uuid

from areacheck.config import configure_logging
from areacheck.core.engine import PARAM_POINT_X, PARAM_POINT_Y, PARAM_SCALE, run_check
from areacheck.core.errors import AreaCheckError
from areacheck.core.response import compose_response
from areacheck.memory.session_history import SessionHistoryStore

USAGE = "Enter: <x> <y> <scale>   (commands: history, clear, exit)"


def handle_line(line, session_id, store, **check_kwargs):
    """
    Process one input line and return the text to print.

    Returns `None` when the loop should stop.
    """
    command = line.strip()

    if command.lower() in ("exit", "quit"):
        return None

    if command.lower() == "history":
        payload = compose_response(store.get(session_id)).to_wire()
        return json.dumps(payload, indent=2)

    if command.lower() == "clear":
        store.invalidate(session_id)
        return "History cleared."

    fields = command.split()
    if len(fields) != 3:
        return f"Expected three values. {USAGE}"

    params = {
        PARAM_POINT_X: [fields[0]],
        PARAM_POINT_Y: [fields[1]],
        PARAM_SCALE: [fields[2]],
    }

    try:
        history = run_check(params, session_id, store, **check_kwargs)
    except AreaCheckError as exc:
        return f"Rejected ({exc.kind}): {exc.reason}"

    record = history[-1]
    verdict = "inside" if record.inside_region else "outside"
    return (
        f"({record.point.x:g}, {record.point.y:g}) at scale {record.point.scale:g}: "
        f"{verdict}  [{len(history)} checks in session]"
    )


def main():
    """Run the interactive terminal session."""
    configure_logging("WARNING")

    store = SessionHistoryStore()
    session_id = uuid.uuid4().hex

    print("AreaCheck started.")
    print(USAGE)
    print("-" * 60)

    while True:

        try:
            line = input("> ")

        except EOFError:
            print()
            break

        except KeyboardInterrupt:
            print("\nInterrupted.")
            break

        if not line.strip():
            continue

        output = handle_line(line, session_id, store)
        if output is None:
            print("Shutting down.")
            break

        print(output)


if __name__ == "__main__":
    main()
