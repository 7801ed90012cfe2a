"""Main entry point for the roman converter package."""
import sys
import json
import argparse
from pathlib import Path
from typing import Optional

from .common.config import DEFAULT_CSV_COLUMN
from .common.results import ConversionResultList
from .convert_values import convert_values, format_result
from .convert_csv_column import convert_csv_column
from .round_trip_table import build_round_trip_table, format_round_trip_lines, write_round_trip_table


def print_menu():
    """Print the main menu."""
    print("\n=== Roman Numeral Converter ===\n")
    print("1. Convert values")
    print("2. Convert CSV column")
    print("3. Write round-trip table")
    print("4. Print round-trip table")
    print("0. Exit")


def load_config(config_path: str) -> dict:
    """Load configuration from JSON file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        return json.load(f)


def config_value(config: dict, key: str, prompt: str, default: Optional[str] = None) -> str:
    """Look up config['paths'][key], asking the user when it is not set."""
    value = config.get('paths', {}).get(key)
    if value:
        return value

    suffix = f" [{default}]" if default else ""
    answer = input(f"{prompt}{suffix}: ").strip()
    if not answer and default:
        return default
    if not answer:
        raise ValueError(f"No value given for {key}")
    return answer


def run_batch(values: list[str], as_json: bool = False) -> int:
    """Convert values given on the command line.

    Returns:
        int: Exit status, 1 if any value failed to convert
    """
    results = convert_values(values)

    if as_json:
        print(ConversionResultList.dump_json(results, indent=2).decode())
    else:
        for result in results:
            print(format_result(result))

    return 0 if all(result.ok for result in results) else 1


def run_table() -> int:
    """Print "n -> roman" and "roman -> n" for every supported value.

    Returns:
        int: Exit status, 1 if any value failed the round trip
    """
    table = build_round_trip_table()

    for line in format_round_trip_lines(table):
        print(line)

    return 0 if table["round_trip_ok"].all() else 1


def main(argv: Optional[list[str]] = None) -> int:
    """Convert the given values, or show the menu when none are given."""
    parser = argparse.ArgumentParser(description='Roman Numeral Converter')
    parser.add_argument('values', nargs='*', help='Arabic or Roman numerals to convert')
    parser.add_argument('--config', help='Path to configuration JSON file')
    parser.add_argument('--json', action='store_true', help='Print results as JSON')
    parser.add_argument('--table', action='store_true',
                        help='Print the round-trip table for every supported value')
    args = parser.parse_args(argv)

    if args.table:
        return run_table()

    if args.values:
        return run_batch(args.values, as_json=args.json)

    # Load configuration
    config = {}
    if args.config:
        try:
            config = load_config(args.config)
            print(f"Loaded configuration from: {args.config}")
        except Exception as e:
            print(f"Error loading config: {e}")
            return 1

    while True:
        print_menu()
        try:
            choice = input("\nEnter your choice (0-4): ").strip()
        except (KeyboardInterrupt, EOFError):
            return 0

        if choice == "0":
            return 0
        elif choice == "1":
            run_convert_values()
        elif choice == "2":
            run_convert_csv_column(config)
        elif choice == "3":
            run_round_trip_table(config)
        elif choice == "4":
            run_print_round_trip_table()
        else:
            print("Invalid choice. Please try again.")


def run_convert_values():
    """Run the convert values function."""
    print("\n--- Convert values ---")

    try:
        values = input("Values (separated by spaces): ").split()
        run_batch(values)
    except Exception as e:
        print(f"Error: {e}")


def run_convert_csv_column(config):
    """Run the convert CSV column function."""
    print("\n--- Convert CSV column ---")

    try:
        input_csv = config_value(config, 'input_csv', "Input CSV")
        column = config.get('column') or DEFAULT_CSV_COLUMN
        output_csv = config.get('paths', {}).get('output_csv')
        output_file = convert_csv_column(input_csv, column, output_csv)
        print(f"Success! Output file: {output_file}")
    except Exception as e:
        print(f"Error: {e}")


def run_round_trip_table(config):
    """Run the write round-trip table function."""
    print("\n--- Write round-trip table ---")

    try:
        table_csv = config_value(config, 'table_csv', "Output CSV", default="round_trip_table.csv")
        output_file = write_round_trip_table(table_csv)
        print(f"Success! Output file: {output_file}")
    except Exception as e:
        print(f"Error: {e}")


def run_print_round_trip_table():
    """Run the print round-trip table function."""
    print("\n--- Print round-trip table ---")

    try:
        run_table()
    except Exception as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    sys.exit(main())
