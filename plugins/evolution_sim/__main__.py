"""
Evolution Simulation - Entry Point

Usage:
    python -m evolution_sim [scenario] [--engine module:Class] [--window WxH]
                            [--train N] [--list]

Examples:
    python -m evolution_sim
    python -m evolution_sim zombies
    python -m evolution_sim --window 1000x1000
    python -m evolution_sim narrow --train 20

Options:
    --engine module:Class   Engine to drive (default: lib_simulation:Simulation)
    --window WxH            Canvas size in pixels (default: 800x800)
    --train N               Headless: train N generations, print summaries, exit
    --list                  Show scenarios and the engine's config fields

Use --list to see all available scenarios.
"""

import sys

from .commands import CommandInterpreter
from .engine_base import DEFAULT_ENGINE, load_engine
from .errors import EngineLoadError, CommandError
from .presets import SCENARIO_ORDER, get_scenario, list_scenarios
from .session import Session
from .terminal import StreamTerminal


def run_headless(engine_cls, generations, scenario=None, terminal=None):
    """Train without a window, printing each generation summary."""
    session = Session(engine_cls)
    terminal = terminal or StreamTerminal()
    interpreter = CommandInterpreter(session, terminal)
    terminal.on_input(interpreter.handle_input)

    if scenario:
        terminal.feed(get_scenario(scenario)["command"])
    terminal.feed(f"train {generations}")
    return session


def print_listing(engine_cls):
    print("\nAvailable scenarios:")
    for key, command, desc in list_scenarios():
        print(f"    {key:12s} {command:42s} {desc}")

    print("\nConfig fields (override with i:<field>=N or f:<field>=X):")
    defaults = Session(engine_cls).default_config()
    for name, value in defaults.items():
        kind = "f" if defaults.kind(name) is float else "i"
        print(f"    {kind}:{name:24s} {value}")
    print()


def main(argv=None):
    scenario = None
    engine_path = DEFAULT_ENGINE
    win_w, win_h = 800, 800
    train_generations = 0
    show_list = False

    args = sys.argv[1:] if argv is None else argv
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--engine" and i + 1 < len(args):
            engine_path = args[i + 1]
            i += 2
        elif arg == "--window" and i + 1 < len(args):
            try:
                win_w, win_h = (int(p) for p in args[i + 1].split("x"))
            except ValueError:
                print(f"Invalid window size: {args[i + 1]} (expected WxH, e.g. 800x800)")
                return 2
            i += 2
        elif arg == "--train" and i + 1 < len(args):
            try:
                train_generations = int(args[i + 1])
            except ValueError:
                print(f"Invalid generation count: {args[i + 1]}")
                return 2
            i += 2
        elif arg == "--list":
            show_list = True
            i += 1
        elif arg in ("--help", "-h"):
            print(__doc__)
            return 0
        elif arg in SCENARIO_ORDER:
            scenario = arg
            i += 1
        else:
            print(f"Unknown argument: {arg}")
            print(f"Use --list to see available scenarios")
            return 2

    try:
        engine_cls = load_engine(engine_path)
    except EngineLoadError as err:
        print(f"Could not load engine: {err}")
        return 1

    try:
        if show_list:
            print_listing(engine_cls)
            return 0

        if train_generations > 0:
            print(f"Headless training: {train_generations} generation(s)"
                  + (f", scenario {scenario}" if scenario else ""))
            run_headless(engine_cls, train_generations, scenario)
            return 0
    except CommandError as err:
        # Engine rejected its own defaults
        print(f"Could not start simulation: {err}")
        return 1

    # Imported late so headless use works without a display
    from .viewer import Viewer

    print(f"Starting Evolution Simulation")
    print(f"  Engine: {engine_path}")
    if scenario:
        print(f"  Scenario: {scenario}")
    print(f"  Window: {win_w}x{win_h}")
    print()

    try:
        viewer = Viewer(engine_cls, width=win_w, height=win_h, start_scenario=scenario)
    except CommandError as err:
        print(f"Could not start simulation: {err}")
        return 1
    viewer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
