import json
import os
from datetime import timedelta

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from studylog.data.repos import delete_all_logs, insert_log
from studylog.services.milestones import recompute_milestones
from studylog.utils.time import local_today


class Command(BaseCommand):
    help = "Replace a user's study logs with demo entries from a JSON file"

    def add_arguments(self, parser):
        parser.add_argument("--user-id", required=True, help="Owner of the seeded logs")
        parser.add_argument(
            "--file", default="demo_logs.json", help="JSON file name to load logs from"
        )

    def handle(self, *args, **options):
        user_id = options["user_id"]
        file_name = options["file"]
        json_file_path = os.path.join(os.path.dirname(__file__), file_name)

        try:
            with open(json_file_path) as json_file:
                entries = json.load(json_file)
        except (OSError, ValueError) as e:
            raise CommandError(f"Error loading data: {e}")

        today = local_today()
        with transaction.atomic():
            deleted = delete_all_logs(user_id)
            self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} existing log(s) for {user_id}"))

            for entry in entries:
                # days_ago keeps the demo week current
                log_date = today - timedelta(days=int(entry.get("days_ago", 0)))
                insert_log(user_id, entry["title"], entry["minutes"], log_date)

        unlocked = recompute_milestones(user_id, reset=True)
        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {len(entries)} log(s) from {file_name}; milestones unlocked: {len(unlocked)}"
            )
        )
