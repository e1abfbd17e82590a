#!/usr/bin/env python3
"""
CLI tool to play a headless snake game with an autopilot

Usage:
    python -m cli.play
    python -m cli.play --player random --seed 7

Examples:
    # Greedy autopilot on the default 17x17 board
    python -m cli.play

    # Wrapping walls, smaller board, print the final board
    python -m cli.play --rows 10 --cols 10 --wrap-walls --show-board

    # Scripted keys instead of an autopilot (one key per frame)
    python -m cli.play --player none --keys "dddsssaaa"

    # Export the game to a video
    python -m cli.play --video ./snake.mp4 --fps 15
"""

import sys
import json
import random
import argparse
import logging

from domain.engine import GameEngine
from domain.errors import ConfigurationError
from players import KeyboardInput, get_player_class, list_players, AVAILABLE_PLAYERS
from services.clock import ManualClock
from services.renderer import TextRenderer
from services.session import GameSession
from settings import load_game_config, get_log_level

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Play a headless snake game',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    # Board options (default to SNAKE_* environment values)
    parser.add_argument('--rows', type=int, help='Number of grid rows')
    parser.add_argument('--cols', type=int, help='Number of grid columns')
    parser.add_argument('--speed', type=int, help='Initial tick interval in milliseconds')
    parser.add_argument(
        '--wrap-walls',
        action='store_true',
        default=None,
        help='Wrap around the edges instead of dying at the walls'
    )

    # Input options
    parser.add_argument(
        '--player',
        choices=AVAILABLE_PLAYERS + ['none'],
        default='greedy',
        help='Autopilot to steer the snake (default: greedy): ' + '; '.join(
            f"{entry['key']} = {entry['description']}" for entry in list_players()
        )
    )
    parser.add_argument(
        '--keys',
        type=str,
        default='',
        help='Keys to press, one per frame, before the autopilot takes over'
    )
    parser.add_argument('--seed', type=int, help='Random seed for food placement and the random player')

    # Loop options
    parser.add_argument('--max-frames', type=int, default=20000, help='Frame limit (default: 20000)')
    parser.add_argument('--frame-ms', type=float, default=16.0, help='Milliseconds per frame (default: 16)')

    # Output options
    parser.add_argument('--show-board', action='store_true', help='Print the final board')
    parser.add_argument('--video', '-o', type=str, help='Write the game to a video (.mp4 or .gif)')
    parser.add_argument('--fps', type=int, default=10, help='Video frames per second (default: 10)')

    return parser


def play(args: argparse.Namespace) -> dict:
    """
    Run one game from parsed arguments.

    Returns:
        A dictionary summarizing the game (score, length, ticks, death_reason).
    """
    config = load_game_config(
        rows=args.rows,
        cols=args.cols,
        initial_speed=args.speed,
        die_from_walls=None if args.wrap_walls is None else not args.wrap_walls
    )
    rng = random.Random(args.seed)
    engine = GameEngine.from_config(config, rng=rng)

    player = None
    if args.player != 'none':
        player_class = get_player_class(args.player)
        if args.player == 'random':
            player = player_class(wrap_walls=not config.die_from_walls, rng=rng)
        else:
            player = player_class(wrap_walls=not config.die_from_walls)

    if args.video:
        from services.video_generator import FrameRenderer
        renderer = FrameRenderer(fps=args.fps)
    else:
        renderer = TextRenderer()

    session = GameSession(
        engine,
        renderer=renderer,
        clock=ManualClock(frame_ms=args.frame_ms),
        player=player,
        keyboard=KeyboardInput()
    )
    session.begin()

    for key in args.keys:
        session.handle_key(key)
        session.step()
        session.clock.tick()

    final = session.run(max_frames=args.max_frames, frame_ms=args.frame_ms)

    if args.show_board:
        print("\n" + final.print_board() + "\n")

    if args.video:
        renderer.write_video(args.video)

    session.destroy()

    data = final.to_dict()
    return {
        "score": data["score"],
        "length": len(data["snake"]),
        "ticks": data["tick_number"],
        "state": data["state"],
        "death_reason": data["death_reason"],
    }


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        result = play(args)
        print(json.dumps(result, indent=2))
    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
