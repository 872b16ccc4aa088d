"""
Quickstart for robotsim.
- Places the robot, walks it around and prints every outcome
- Builds commands with the wire encoders instead of hand-written strings

Run from the repository root:
    python examples/quickstart.py
"""

from robotsim import Direction, RobotSimulator
from robotsim.protocol import wire


def main() -> None:
    sim = RobotSimulator()
    commands = [
        wire.encode_report(),
        wire.encode_place(1, 2, Direction.EAST),
        wire.encode_move(),
        wire.encode_move(),
        wire.encode_left(),
        wire.encode_move(),
        wire.encode_report(),
    ]
    for command, outcome in zip(commands, sim.process_batch(commands)):
        print(f"{command:<16} -> {outcome.as_dict()}")

    last = sim.process(wire.encode_report())
    decoded = wire.decode_report(last.report) if last.report else None
    print("decoded report:", decoded)
    raise SystemExit(0 if decoded else 1)


if __name__ == "__main__":
    main()
