"""
Scenario Presets

Named `reset` command lines known to produce interesting behaviours,
plus the introduction shown when the viewer starts.
"""

SCENARIOS = {
    "avoid": {
        "command": "r i:ga_reverse=1 f:sim_speed_min=0.003",
        "description": "birdies *avoid* food",
    },
    "zombies": {
        "command": "r i:brain_neurons=1",
        "description": "single-neuroned zombies",
    },
    "bigbirds": {
        "command": "r f:food_size=0.05",
        "description": "biiiigie birdies",
    },
    "narrow": {
        "command": "r f:eye_fov_angle=0.45",
        "description": "narrow field of view",
    },
}

SCENARIO_ORDER = ["avoid", "zombies", "bigbirds", "narrow"]


def get_scenario(name):
    """Get a scenario by name. Returns None if not found."""
    return SCENARIOS.get(name)


def list_scenarios():
    """Return list of (key, command, description) for scenarios."""
    return [(k, SCENARIOS[k]["command"], SCENARIOS[k]["description"])
            for k in SCENARIO_ORDER if k in SCENARIOS]


ABOUT = [
    "Each triangle represents a bird; each bird has an *eye*, whose eyesight "
    "is drawn around the bird, and a *brain* that decides where and how fast "
    "the bird should be moving.",

    "Each circle represents a food (pizza, so to say), which birds are meant "
    "to find and eat.",

    "All birds start flying with randomized brains, and after 2500 turns "
    "(around 40 real-time seconds), birds who managed to eat the most foods "
    "are reproduced, and their offspring starts the simulation anew.",

    "Thanks to evolution, every generation gets slightly better at locating "
    "the food - almost as if the birds programmed themselves!",

    "You can affect the simulation by entering commands in the input at the "
    "bottom of this panel - for starters, try executing the `train` command "
    "a few times (write `t`, press enter, write `t`, press enter etc.) - this "
    "fast-forwards the simulation, allowing you to see the birds getting "
    "smarter by the second.",
]

COMMANDS_HELP = [
    "  p, pause                  pause / resume",
    "  r, reset [a=N] [f=N] [n=N] [p=N] [i:field=N] [f:field=X]",
    "                            start over with a new config",
    "  t, train [N]              fast-forward N generations",
]


def intro_lines():
    """Lines printed to the terminal on startup."""
    lines = ["Evolution Simulation.", "", "---- About ----", ""]
    for paragraph in ABOUT:
        lines += [paragraph, ""]

    lines += ["---- Commands ----", ""] + COMMANDS_HELP + [""]

    lines += ["---- Funky scenarios ----", ""]
    for _key, command, description in list_scenarios():
        lines += [f"  * {command}", f"    ({description})", ""]

    lines.append("----")
    return lines
