from django.core.management.base import BaseCommand

from championship.services.catalog import all_constructors, all_drivers


class Command(BaseCommand):
    help = 'List drivers, or constructors with their drivers'

    def add_arguments(self, parser):
        parser.add_argument('--constructors', action='store_true',
                            help='List constructors instead of drivers')

    def handle(self, *args, **options):
        if options['constructors']:
            for constructor in all_constructors():
                names = ', '.join(driver.name for driver in constructor.drivers.all()) or '-'
                self.stdout.write(f"  {constructor.name} ({constructor.nationality or '?'}): {names}")
            return

        for driver in all_drivers():
            team = driver.constructor.name if driver.constructor else 'no constructor'
            self.stdout.write(
                f"  [{driver.id}] #{driver.number or '-'} {driver.name} "
                f"({driver.nationality or '?'}) - {team}"
            )
