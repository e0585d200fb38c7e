import os
import sys
import json
import logging
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from kaggle_environments import make

from halite_fleet_bot.main import agent


ANALYSIS_FOLDER = "analysis"

#    1    2
#    3    4
HALITE_BOT_ORDER_COLOR = [
    "#E2CD13",
    "#F24E4E",
    "#34BB1C",
    "#7B33E2"
]


def main():
    argv = sys.argv
    argc = len(argv)

    if (argc not in (2, 3) or not argv[1].isdigit()
            or (argc == 3 and not argv[2].isdigit())):
        print("\"steps\" parameter not passed or is a string.\n"
              "Example usage: 'python run.py 400 [seed]'")
        exit(1)
    elif (int(argv[1]) > 400):
        print("Warning: you shouldn't attempt to run games with more than 400 steps")

    steps = int(argv[1])

    # random seed for the kaggle environment, None lets kaggle pick one
    seed = int(argv[2]) if argc == 3 else None

    logging.basicConfig(level=logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    # our bot against kaggle's built-in random agents. None is an inactive
    # agent, a file name loads an agent from that file
    agents = [
        {'bot': agent, 'name': "Fleet bot"},
        {'bot': "random", 'name': "Random 1"},
        {'bot': "random", 'name': "Random 2"},
        {'bot': "random", 'name': "Random 3"}
    ]

    agent_names = list(map(lambda a: a['name'], agents))
    agent_bots = list(map(lambda a: a['bot'], agents))

    if seed is not None:
        print(f"Running for {steps} steps with seed = {seed}...")
        config = {"randomSeed": seed, "episodeSteps": steps}
    else:
        print(f"Running for {steps} steps...")
        config = {"episodeSteps": steps}

    print("Setting up bots...")
    print()

    halite = make("halite", debug=True, configuration=config)
    played_match = halite.run(agent_bots)
    with open("data.json", "w") as file:
        json.dump(played_match, fp=file, sort_keys=True, indent=4)

    make_graphs(played_match, agent_names)

    # render the replay to simulation.html
    print("Rendering episode...")
    out = halite.render(mode="html", width=800, height=600)
    with open(os.path.join(os.curdir, "simulation.html"), "w") as file:
        file.write(out)

    print("Simulation done.\n")

    return


def make_graphs(played_match, bot_names):
    print(f"Generating graphs based on {len(played_match)} steps...\n")
    os.makedirs(ANALYSIS_FOLDER, exist_ok=True)

    total_halite_during_match(played_match, bot_names)
    plt.clf()

    total_ships_during_match(played_match, bot_names)
    plt.clf()

    total_yards_during_match(played_match, bot_names)
    plt.clf()


def prepare_plot_settings(bot_names):
    plt.figure(num=None, figsize=(10, 6), dpi=80, facecolor='w', edgecolor='k')

    handles = []
    for i, bot_name in enumerate(bot_names):
        handles.append(mpatches.Patch(
            color=HALITE_BOT_ORDER_COLOR[i], label=bot_name))

    plt.legend(handles=handles, title="Agents",
               loc='upper left', bbox_to_anchor=(0, 1.3))

    plt.xlabel('Step')


# one line per player of some per-step statistic of its observation entry
# players[i] = [halite, yards, ships]
def plot_player_stat(played_match, bot_names, stat):
    each_bot_stats = [[] for _ in range(len(bot_names))]

    for step in played_match:
        players = step[0].observation.players

        for i in range(len(players)):
            each_bot_stats[i].append(stat(players[i]))

    for i, values in enumerate(each_bot_stats):
        plt.plot(values, label=bot_names[i], color=HALITE_BOT_ORDER_COLOR[i])


def total_halite_during_match(played_match, bot_names):
    prepare_plot_settings(bot_names)
    plot_player_stat(played_match, bot_names, lambda player: player[0])
    plt.ylabel('Banked halite')
    plt.savefig(os.path.join(ANALYSIS_FOLDER, "graph_total_halite_during_match.png"),
                bbox_inches='tight')


def total_ships_during_match(played_match, bot_names):
    prepare_plot_settings(bot_names)
    plot_player_stat(played_match, bot_names, lambda player: len(player[2]))
    plt.ylabel('Ships')
    plt.savefig(os.path.join(ANALYSIS_FOLDER, "graph_total_ships_during_match.png"),
                bbox_inches='tight')


def total_yards_during_match(played_match, bot_names):
    prepare_plot_settings(bot_names)
    plot_player_stat(played_match, bot_names, lambda player: len(player[1]))
    plt.ylabel('Shipyards and dropoffs')
    plt.savefig(os.path.join(ANALYSIS_FOLDER, "graph_total_yards_during_match.png"),
                bbox_inches='tight')


if __name__ == "__main__":
    main()
