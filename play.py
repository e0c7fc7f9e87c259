# play.py
import argparse
import sys

from rubik.moves import InvalidNotation
from console.check import run_invariant_check
from console.config import CONFIG
from console.session import Session
from console.utils import random_scramble, set_seed


COMMANDS = "Commands: 'reset', 'undo', 'scramble', 'log', 'exit'. Anything else is applied as moves."


def print_state(session: Session):
    print("\n" + "=" * 50)
    print(" State: " + session.state())
    for face, block in session.blocks().items():
        print(f"   {face}: {block[0:3]} {block[3:6]} {block[6:9]}")
    print("=" * 50 + "\n")


# ------------------------------------------------------------
# Interactive Loop
# ------------------------------------------------------------
def interactive_run(session: Session):
    """Runs the main move-input loop."""
    print("\n--- Cube Console Ready ---")
    print(COMMANDS)
    print_state(session)

    while True:
        try:
            text = input(CONFIG["prompt"]).strip()
        except EOFError:
            break

        command = text.lower()
        if command == "exit":
            break
        if command == "reset":
            session.reset()
        elif command == "undo":
            token = session.undo()
            print(f"↩️  Undid {token}" if token else "Nothing to undo.")
        elif command == "scramble":
            session.input_change(random_scramble(CONFIG["scramble_length"]))
            print(f"🎲 Scramble: {session.moves}")
            session.apply()
        elif command == "log":
            print(session.log.describe())
            print(session.log.sequence() or "(empty)")
            continue
        elif text:
            session.input_change(text)
            try:
                session.apply()
            except InvalidNotation as e:
                print(f"\n[ERROR] {e} (moves before it were applied)")
        else:
            continue

        print_state(session)


def main(argv=None):
    parser = argparse.ArgumentParser(description="3×3×3 cube move console")
    parser.add_argument("--moves", help="apply a move sequence and print the face string")
    parser.add_argument("--check", type=int, metavar="N", help="run N random invariant checks")
    parser.add_argument("--export", metavar="PATH", help="write the move log as JSON on exit")
    args = parser.parse_args(argv)

    set_seed(CONFIG["seed"])
    session = Session()

    if args.check is not None:
        summary = run_invariant_check(trials=args.check)
        status = "✅ passed" if summary["passed"] else f"❌ {len(summary['failures'])} failures"
        print(f"Invariant check over {summary['trials']} scrambles: {status}")
        return 0 if summary["passed"] else 1

    if args.moves is not None:
        session.input_change(args.moves)
        try:
            session.apply()
        except InvalidNotation as e:
            print(f"FATAL ERROR: {e}", file=sys.stderr)
            return 2
        print(session.state())
    else:
        interactive_run(session)

    if args.export:
        session.log.export_json(args.export)
        print(f"📝 Move log written to {args.export}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
