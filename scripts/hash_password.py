"""Print an ADMIN_PASSWORD_HASH value for the given password.

Usage: python scripts/hash_password.py  (prompts for the password)
"""
import getpass
import sys

from werkzeug.security import generate_password_hash


def main():
    password = getpass.getpass('Admin password: ')
    if not password:
        print('Password must not be empty.', file=sys.stderr)
        return 1
    if password != getpass.getpass('Repeat password: '):
        print('Passwords do not match.', file=sys.stderr)
        return 1
    print(generate_password_hash(password))
    return 0


if __name__ == '__main__':
    sys.exit(main())
