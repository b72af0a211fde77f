from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from chatpoll.resources import TABLE_RESOURCES


class Command(BaseCommand):
    help = "Export recorded posts, answers, users and rooms as CSV, one file per table with a header row."

    def add_arguments(self, parser):
        parser.add_argument("--table", choices=sorted(TABLE_RESOURCES), help="Export only this table")
        parser.add_argument("--output-dir", help="Directory to write <table>.csv files to (default: stdout)")

    def handle(self, *args, **options):
        tables = [options["table"]] if options["table"] else list(TABLE_RESOURCES)
        output_dir = options["output_dir"]
        if output_dir is None and len(tables) > 1:
            raise CommandError("Pass --table to export to stdout, or --output-dir to export every table")

        for table in tables:
            dataset = TABLE_RESOURCES[table]().export()
            if output_dir is None:
                self.stdout.write(dataset.csv, ending="")
                continue
            path = Path(output_dir) / f"{table}.csv"
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(dataset.csv, encoding="utf-8")
            self.stdout.write(self.style.SUCCESS(f"Exported {len(dataset)} row(s) from {table} to {path}"))
