"""
relove/cli.py
Command-line interface for the Relove coaching rules.

USAGE:
  relove daily-action --scenario hot_cold --day 10 --hours 72 --last-response positive --mood calm
  relove safe-text "I miss you so much, please reply"
  relove greenlight --scenario no_contact --silence-hours 80 --last-response none --mood calm
  relove analyze "WHY are you IGNORING ME???"
  relove serve --port 8765

  --json prints the raw response; --seed N makes template picks repeatable.
"""

import argparse
import json
import logging
import random
import sys
from typing import Any, Dict, List, Optional, get_args

from relove.api import CoachAPI
from relove.errors import InvalidInput
from relove.models.schema import (
    DailyCheckin,
    GreenlightCheckin,
    GreenlightScenario,
    LastResponse,
    Scenario,
)

logger = logging.getLogger(__name__)

GREEN  = '\033[92m'
YELLOW = '\033[93m'
RED    = '\033[91m'
CYAN   = '\033[96m'
RESET  = '\033[0m'
BOLD   = '\033[1m'

LIGHT_COLORS = {'red': RED, 'yellow': YELLOW, 'green': GREEN}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog        = 'relove',
        description = 'Relove — breakup-recovery coaching rules',
        formatter_class = argparse.RawDescriptionHelpFormatter,
        epilog = """
NOTE:
  Suggestions come from fixed rules, not a clinician.
  Nothing you type is stored or sent anywhere.
        """
    )
    parser.add_argument('--json', action='store_true', help='Print the raw JSON response')
    parser.add_argument('--seed', type=int, default=None, help='Seed for repeatable template picks')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    sub = parser.add_subparsers(dest='command', required=True)

    daily = sub.add_parser('daily-action', help="Today's mission or message")
    daily.add_argument('--scenario', required=True, choices=get_args(Scenario))
    daily.add_argument('--day', required=True, type=int, help='Recovery day, 1-365')
    daily.add_argument('--hours', required=True, type=float, help='Hours since last contact')
    daily.add_argument('--last-response', required=True, choices=get_args(LastResponse))
    daily.add_argument('--mood', required=True, choices=get_args(DailyCheckin))

    safe = sub.add_parser('safe-text', help='Score and rewrite a draft message')
    safe.add_argument('text', help="Draft message ('-' reads stdin)")

    green = sub.add_parser('greenlight', help='Is it a good time to reach out?')
    green.add_argument('--scenario', required=True, choices=get_args(GreenlightScenario))
    green.add_argument('--silence-hours', required=True, type=float)
    green.add_argument('--last-response', required=True, choices=get_args(LastResponse))
    green.add_argument('--relapse', action='store_true', help='You relapsed (contacted / checked) today')
    green.add_argument('--mood', required=True, choices=get_args(GreenlightCheckin))

    scan = sub.add_parser('analyze', help='Raw risk scan of a draft message')
    scan.add_argument('text', help="Draft message ('-' reads stdin)")

    serve = sub.add_parser('serve', help='Run the local HTTP API')
    serve.add_argument('--host', default=None)
    serve.add_argument('--port', type=int, default=None)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # ── LOGGING SETUP ────────────────────────────────────────
    logging.basicConfig(
        level   = logging.DEBUG if args.verbose else logging.INFO,
        format  = '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt = '%H:%M:%S',
    )

    if args.command == 'serve':
        from relove.api import serve
        serve(host=args.host, port=args.port)
        return 0

    picker = random.Random(args.seed).choice if args.seed is not None else None
    api = CoachAPI(picker=picker)

    try:
        if args.command == 'daily-action':
            result = api.daily_action({
                'scenario':               args.scenario,
                'day_index':              args.day,
                'last_contact_hours':     args.hours,
                'last_response_from_her': args.last_response,
                'emotional_checkin':      args.mood,
            })
            render = _render_daily_action
        elif args.command == 'greenlight':
            result = api.greenlight({
                'scenario':               args.scenario,
                'silence_hours':          args.silence_hours,
                'last_response_from_her': args.last_response,
                'relapse_today':          args.relapse,
                'emotional_checkin':      args.mood,
            })
            render = _render_greenlight
        elif args.command == 'safe-text':
            result = api.safe_text({'text': _read_text(args.text)})
            render = _render_safe_text
        else:
            result = api.analyze({'text': _read_text(args.text)})
            render = _render_analysis
    except InvalidInput as exc:
        _print(f"{RED}Error: {exc}{RESET}")
        for err in exc.errors:
            path = '.'.join(str(p) for p in err['path'])
            _print(f"  • {path}: {err['message']}")
        return 2

    if args.json:
        _print(json.dumps(result, indent=2))
    else:
        render(result)
    return 0


def _read_text(value: str) -> str:
    return sys.stdin.read().strip() if value == '-' else value


# ── RENDERERS ────────────────────────────────────────────────

def _render_daily_action(r: Dict[str, Any]) -> None:
    _print(f"\n{BOLD}{r['action'].upper()}: {r['title']}{RESET}")
    _print(f"  {r['content']}")
    _print(f"\n  Why      : {r['why']}")
    _print(f"  Momentum : {r['momentum']['type']} ({r['momentum']['level']}/5)")
    for src in r.get('sources', []):
        _print(f"  Source   : {CYAN}{src}{RESET}")


def _render_greenlight(r: Dict[str, Any]) -> None:
    color = LIGHT_COLORS[r['light']]
    _print(f"\n{BOLD}{color}● {r['light'].upper()}{RESET}  {r['reason']}")
    if r.get('wait_indefinite'):
        _print("  Wait     : indefinitely")
    elif r['wait_hours'] > 0:
        _print(f"  Wait     : {r['wait_hours']:g}h")
    _print(f"  Next     : {r['next_step']}")
    if r['risk_flags']:
        _print(f"  Flags    : {YELLOW}{', '.join(r['risk_flags'])}{RESET}")


def _render_safe_text(r: Dict[str, Any]) -> None:
    color = GREEN if r['score'] >= 7 else YELLOW if r['score'] >= 4 else RED
    _print(f"\n{BOLD}Safety score: {color}{r['score']}/10{RESET}")
    if r['issues']:
        _print(f"  Issues   : {', '.join(r['issues'])}")
    _print(f"  Rewrite  : {GREEN}{r['rewritten']}{RESET}")
    for alt in r['alternatives']:
        _print(f"  Or       : {alt}")
    for note in r['notes']:
        _print(f"  {CYAN}→{RESET} {note}")


def _render_analysis(r: Dict[str, Any]) -> None:
    _print(f"\n{BOLD}Risk score: {r['score']}/10{RESET}")
    _print(f"  Tags     : {', '.join(r['issues']) or 'none'}")


def _print(msg): print(msg)


if __name__ == '__main__':
    sys.exit(main())
