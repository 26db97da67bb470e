"""
G-DAX Diagnosis - Command Line Interface

Usage:
    gdax-report report survey.json              # Print the report for one survey
    gdax-report report survey.json --resend     # Rebuild a report dated at submission
    gdax-report report survey.json --base-url https://example.org
    gdax-report stats surveys.json              # Print statistics for a list of surveys
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .assessment import ReportEngine, SurveyValidationError, parse_record, summarize_surveys
from .config import get_config

logger = logging.getLogger(__name__)


def load_json(path: str):
    """Read a JSON document from a file, or stdin for '-'"""
    if path == '-':
        return json.load(sys.stdin)
    with open(Path(path), encoding='utf-8') as f:
        return json.load(f)


def run_report(args, config_class) -> dict:
    """Build the report payload for one survey record"""
    if args.base_url:
        config_class = type('CLIConfig', (config_class,), {'REPORT_BASE_URL': args.base_url})

    engine = ReportEngine(config_class)
    survey = parse_record(load_json(args.survey_file))

    if args.resend:
        report = engine.regenerate_report(survey)
    else:
        report = engine.generate_report(survey)

    payload = report.to_dict()
    payload['notification'] = report.notification_context(engine.report_url(survey.id))
    return payload


def run_stats(args, config_class) -> dict:
    """Build the statistics payload for a list of survey records"""
    records = load_json(args.surveys_file)
    if not isinstance(records, list):
        raise SurveyValidationError([{'field': 'surveys', 'message': 'expected a JSON list'}])
    return summarize_surveys(parse_record(record) for record in records).to_dict()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gdax-report',
        description='Generate G-DAX industry and job transition diagnosis reports.'
    )
    parser.add_argument('--indent', type=int, default=2, help='JSON indentation (default: 2)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    report_parser = subparsers.add_parser('report', help='Generate the report for one survey')
    report_parser.add_argument('survey_file', help="Survey record JSON file, or '-' for stdin")
    report_parser.add_argument('--resend', action='store_true',
                               help='Date the report at survey submission instead of today')
    report_parser.add_argument('--base-url', help='Override REPORT_BASE_URL for report links')
    report_parser.set_defaults(handler=run_report)

    stats_parser = subparsers.add_parser('stats', help='Summarize a list of surveys')
    stats_parser.add_argument('surveys_file', help="JSON file holding a list of survey records")
    stats_parser.set_defaults(handler=run_stats)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config_class = get_config()
    logging.basicConfig(
        level=getattr(logging, str(config_class.LOG_LEVEL).upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    try:
        payload = args.handler(args, config_class)
    except SurveyValidationError as e:
        logger.error(f"Invalid survey data: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Could not read input: {e}")
        print(f"Error: could not read input: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        # Configuration problems, e.g. no REPORT_BASE_URL for report links
        logger.error(f"Configuration error: {e}")
        print(f"Error: configuration error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
