"""Bootstrap an account from the command line.

    python create_user.py --name "Super Admin" --phone 081200000000 --password admin1234
    python create_user.py --role COACH --name "Coach Budi" --phone 081211111111 --password coach1234
"""
import argparse
import sys

from imt_fitness import create_app
from imt_fitness.errors import ApiError
from imt_fitness.extensions import db
from imt_fitness.models import Role
from imt_fitness.services.users import create_user


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create an IMT Fitness user")
    parser.add_argument("--name", required=True)
    parser.add_argument("--phone", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--email")
    parser.add_argument("--role", default=Role.ADMIN.value, choices=[r.value for r in Role])
    parser.add_argument("--coach-id", type=int)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    app = create_app()

    with app.app_context():
        try:
            user = create_user(
                db.session,
                name=args.name,
                phone=args.phone,
                password=args.password,
                role=args.role,
                email=args.email,
                coach_id=args.coach_id,
            )
        except ApiError as exc:
            app.logger.error(f"Could not create user: {exc.message}")
            return 1

        app.logger.info(f"{user.role.capitalize()} created: id={user.id} phone={user.phone}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
