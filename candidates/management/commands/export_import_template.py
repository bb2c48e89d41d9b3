from pathlib import Path

from django.core.management.base import BaseCommand

from candidates.services.template import TEMPLATE_FORMATS, build_template, template_filename


class Command(BaseCommand):
    help = "Write the candidate import template (header row + example rows)"

    def add_arguments(self, parser):
        parser.add_argument(
            "path",
            nargs="?",
            default=".",
            help="Target file, or a directory for the default dated file name",
        )
        parser.add_argument("--format", default="csv", choices=TEMPLATE_FORMATS)

    def handle(self, *args, **options):
        fmt = options["format"]
        path = Path(options["path"])

        if path.is_dir():
            path = path / template_filename(fmt)

        path.write_bytes(build_template(fmt))
        self.stdout.write(self.style.SUCCESS(f"Template written to {path}"))
