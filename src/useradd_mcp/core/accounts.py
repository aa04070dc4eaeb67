"""Account creation through useradd."""

from typing import List

from .commands import CommandRunner
from .logging import get_logger
from .records import AccountCreationRequest, AccountCreationResult

logger = get_logger("accounts")

# (request field, useradd flag) in the order flags are emitted
VALUE_FLAGS_BEFORE_GROUPS = [
    ('base_dir', '-b'),
    ('comment', '-c'),
    ('home_dir', '-d'),
    ('expire_date', '-e'),
    ('inactive', '-f'),
    ('gid', '-g'),
]

FLAGS_AFTER_GROUPS = [
    ('skel_dir', '-k'),
    ('create_home', '-m'),
    ('no_create_home', '-M'),
    ('no_user_group', '-N'),
    ('non_unique', '-o'),
    ('password', '-p'),
    ('system', '-r'),
    ('shell', '-s'),
    ('uid', '-u'),
    ('user_group', '-U'),
    ('selinux_user', '-Z'),
    ('selinux_range', '--selinux-range'),
]


def _append_flag(args: List[str], flag: str, value) -> None:
    if isinstance(value, bool):
        if value:
            args.append(flag)
    elif value:
        args.extend([flag, str(value)])


def build_useradd_args(request: AccountCreationRequest) -> List[str]:
    """
    Translate a creation request into useradd arguments.

    Empty strings, zero numbers and false booleans contribute nothing. The
    username is always the last argument.
    """
    args: List[str] = []
    for field, flag in VALUE_FLAGS_BEFORE_GROUPS:
        _append_flag(args, flag, getattr(request, field))
    if request.groups:
        args.extend(['-G', ','.join(request.groups)])
    for field, flag in FLAGS_AFTER_GROUPS:
        _append_flag(args, flag, getattr(request, field))
    args.append(request.username)
    return args


class AccountCreator:
    """Creates accounts with useradd."""

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    def create_account(self, request: AccountCreationRequest) -> AccountCreationResult:
        """
        Create an account.

        A non-zero exit from useradd is reported through success=False with
        the captured output as message; callers must check success.

        Raises:
            ExternalToolError: If useradd cannot be launched at all
        """
        args = build_useradd_args(request)
        logger.info(f"Creating account {request.username}")
        returncode, output = self.runner.useradd(args)
        if returncode != 0:
            logger.warning(f"useradd exited with status {returncode} for {request.username}")
        return AccountCreationResult(success=returncode == 0, message=output)
