# scripts/issue_token.py
"""
Print a bearer token for exercising protected routes locally.

Usage example:
    python -m scripts.issue_token alice --role admin
"""

import argparse

from testimonials_api.auth.roles import RoleEnum
from testimonials_api.auth.tokens import create_access_token


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("subject")
    parser.add_argument("--role", choices=[r.value for r in RoleEnum], default=RoleEnum.user.value)
    parser.add_argument("--expires-in", type=int, default=None, help="seconds")
    args = parser.parse_args(argv)

    print(create_access_token(args.subject, RoleEnum(args.role), expires_in=args.expires_in))


if __name__ == "__main__":
    main()
