"""
Django management command to create a portal administrator.

Shell access is trusted, so no ADMIN_CREATION_KEY is required here.

Usage:
    python manage.py create_admin --username captain --name "Barangay Captain"
    python manage.py create_admin --username captain --name "Barangay Captain" --password secret
"""

import getpass
from django.core.management.base import BaseCommand, CommandError
from barangay.exceptions import BarangayError
from barangay.services.auth_service import AuthService


class Command(BaseCommand):
    help = "Create an administrator account for the barangay portal"

    def add_arguments(self, parser):
        parser.add_argument("--username", required=True)
        parser.add_argument("--name", required=True)
        parser.add_argument("--password", help="Prompted for when omitted")

    def handle(self, *args, **options):
        password = options["password"] or getpass.getpass("Password: ")
        if len(password) < 6:
            raise CommandError("Password must be at least 6 characters")

        try:
            user = AuthService().create_admin(options["username"], password, options["name"])
        except BarangayError as e:
            raise CommandError(str(e.detail))

        self.stdout.write(self.style.SUCCESS(f"✓ Created admin account {user.username}"))
