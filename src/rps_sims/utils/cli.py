import argparse


def build_parser():
    parser = argparse.ArgumentParser(description='Headless rock-paper-scissors arena')
    parser.add_argument('--preset', type=str, default=None, metavar='PATH',
                        help='YAML preset to start from (default: built-in defaults)')
    parser.add_argument('--seed', type=int, default=None, metavar='N',
                        help='random seed (default: from preset, else unseeded)')
    parser.add_argument('--n_steps', type=int, default=3600, metavar='N',
                        help='number of ticks to simulate (default: 3600)')
    parser.add_argument('--speed', type=float, default=None, metavar='V',
                        help='particle speed, clamped to [0.5, 10] (default: 2.5)')
    parser.add_argument('--rock', type=int, default=None, metavar='N',
                        help='initial rock population, clamped to [0, 50] (default: 10)')
    parser.add_argument('--paper', type=int, default=None, metavar='N',
                        help='initial paper population, clamped to [0, 50] (default: 10)')
    parser.add_argument('--scissors', type=int, default=None, metavar='N',
                        help='initial scissors population, clamped to [0, 50] (default: 10)')
    parser.add_argument('--width', type=float, default=None, metavar='W',
                        help='arena width (default: 1200)')
    parser.add_argument('--height', type=float, default=None, metavar='H',
                        help='arena height (default: 800)')
    parser.add_argument('--radius', type=float, default=None, metavar='R',
                        help='particle radius (default: 5)')
    parser.add_argument('--tick_rate', type=int, default=None, metavar='N',
                        help='ticks per second of simulated time, used for log cadence (default: 60)')
    parser.add_argument('--record_history', action='store_true', default=None,
                        help='keep per-tick population counts in memory')
    parser.add_argument('--stop_on_winner', action='store_true',
                        help='stop as soon as a single kind remains')
    parser.add_argument('--log_level', type=str, default='INFO',
                        help='logging level (default: INFO)')
    parser.add_argument('--log_file', type=str, default=None,
                        help='optional rotating log file')
    parser.add_argument('--log_interval', type=int, default=None, metavar='N',
                        help='ticks between population log lines (default: tick_rate)')
    return parser

'''
usage: python scripts/main.py --seed 42 --n_steps 6000 --speed 4 \
    --rock 20 --paper 15 --scissors 25 --record_history --log_level DEBUG
'''
