"""Account and group enumeration through getent."""

from typing import Dict, List, Optional

from .commands import CommandRunner, ExternalToolError
from .logging import get_logger
from .records import AccountRecord, GroupRecord, ListUsersResult, check_account_name
from ..config.models import DirectoryConfig

logger = get_logger("directory")

PASSWD_FIELDS = 7
GROUP_FIELDS = 4


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def parse_account_line(line: str, system_gid_threshold: int = 1000) -> Optional[AccountRecord]:
    """
    Parse a passwd line.

    Args:
        line: name:password:uid:gid:comment:home:shell
        system_gid_threshold: GIDs below this mark system accounts

    Returns:
        AccountRecord, or None when the field count is wrong
    """
    parts = line.split(':')
    if len(parts) != PASSWD_FIELDS:
        logger.debug(f"Skipping malformed passwd line: {line!r}")
        return None

    gid = _to_int(parts[3])
    return AccountRecord(
        username=parts[0],
        password=parts[1],
        uid=_to_int(parts[2]),
        gid=gid,
        comment=parts[4],
        home=parts[5],
        shell=parts[6],
        is_system_user=gid < system_gid_threshold,
        groups=[],
    )


def parse_group_line(line: str) -> Optional[GroupRecord]:
    """
    Parse a group line (name:password:gid:member,member).

    An empty member field gives members == [""].
    """
    parts = line.split(':')
    if len(parts) != GROUP_FIELDS:
        logger.debug(f"Skipping malformed group line: {line!r}")
        return None

    return GroupRecord(
        name=parts[0],
        password=parts[1],
        gid=_to_int(parts[2]),
        members=parts[3].split(','),
    )


def cross_reference(accounts: List[AccountRecord], groups: List[GroupRecord]) -> List[AccountRecord]:
    """
    Append each group's name to the groups list of its member accounts.

    Groups are visited in enumeration order, so each account's list follows
    that order. Empty member names are never matched.

    Args:
        accounts: Account records, updated in place
        groups: Group records

    Returns:
        The same account list
    """
    by_name: Dict[str, List[AccountRecord]] = {}
    for account in accounts:
        by_name.setdefault(account.username, []).append(account)

    for group in groups:
        for member in group.members:
            if not member:
                continue
            for account in by_name.get(member, []):
                account.groups.append(group.name)

    return accounts


class DirectoryReader:
    """Reads the passwd and group databases."""

    def __init__(self, runner: CommandRunner, directory_config: DirectoryConfig):
        self.runner = runner
        self.directory_config = directory_config

    def list_accounts(self, username: Optional[str] = None) -> List[AccountRecord]:
        """
        List accounts, optionally narrowed to one username.

        Raises:
            ValueError: If the username looks like an option
            ExternalToolError: If getent fails
        """
        if username:
            check_account_name(username)
        threshold = self.directory_config.system_gid_threshold
        accounts = []
        for line in self.runner.enumerate("passwd", username):
            account = parse_account_line(line, threshold)
            if account is not None:
                accounts.append(account)
        return accounts

    def list_groups(self) -> List[GroupRecord]:
        """
        List all groups.

        Raises:
            ExternalToolError: If getent fails
        """
        groups = []
        for line in self.runner.enumerate("group"):
            group = parse_group_line(line)
            if group is not None:
                groups.append(group)
        return groups

    def list_groups_for_username(self, username: str) -> List[str]:
        """Names of the group entries returned by a group lookup keyed on username."""
        check_account_name(username)
        return [line.split(':')[0] for line in self.runner.enumerate("group", username) if line]

    def list_users(self, username: Optional[str] = None) -> ListUsersResult:
        """
        List accounts with their supplementary groups.

        With a username, only that account is looked up and the group listing
        is left out of the result. Without one, every account and group is
        read and cross-referenced.

        Raises:
            ExternalToolError: If an account or full group listing fails
        """
        accounts = self.list_accounts(username)

        if username:
            if accounts:
                try:
                    accounts[0].groups = self.list_groups_for_username(username)
                except ExternalToolError as e:
                    logger.warning(f"Could not resolve groups for {username}: {e}")
            return ListUsersResult(users=accounts)

        groups = self.list_groups()
        cross_reference(accounts, groups)
        return ListUsersResult(users=accounts, groups=groups)
