"""Account and group records."""

from typing import List, Optional
from pydantic import BaseModel, Field

# A name starting with "-" would be read by getent/useradd as an option
ACCOUNT_NAME_PATTERN = r"^[^-]"


def check_account_name(name: str) -> str:
    """Reject names the external utilities would parse as options."""
    if name.startswith('-'):
        raise ValueError(f"Invalid account name {name!r}: must not start with '-'")
    return name


class AccountRecord(BaseModel):
    """One entry of the passwd database."""

    username: str
    password: str
    uid: int
    gid: int
    comment: str
    home: str
    shell: str
    is_system_user: bool
    groups: List[str] = Field(default_factory=list, description="Supplementary group names")


class GroupRecord(BaseModel):
    """One entry of the group database."""

    name: str
    password: str
    gid: int
    members: List[str] = Field(default_factory=list)


class ListUsersResult(BaseModel):
    """Result of a listing. groups is None for a single-username lookup."""

    users: List[AccountRecord] = Field(description="the list of users on the system")
    groups: Optional[List[GroupRecord]] = Field(default=None, description="the list of groups on the system")


class AccountCreationRequest(BaseModel):
    """Arguments of a useradd invocation."""

    username: str = Field(..., min_length=1, pattern=ACCOUNT_NAME_PATTERN, description="the username of the new account")
    base_dir: str = Field(default="", description="the base directory for the home directory of the new account")
    comment: str = Field(default="", description="the GECOS field of the new account")
    home_dir: str = Field(default="", description="the home directory of the new account")
    expire_date: str = Field(default="", description="the expiration date of the new account")
    inactive: int = Field(default=0, description="the password inactivity period of the new account")
    gid: str = Field(default="", description="the name or ID of the primary group of the new account")
    groups: List[str] = Field(default_factory=list, description="the list of supplementary groups of the new account")
    skel_dir: str = Field(default="", description="the alternative skeleton directory")
    create_home: bool = Field(default=False, description="create the user's home directory")
    no_create_home: bool = Field(default=False, description="do not create the user's home directory")
    no_user_group: bool = Field(default=False, description="do not create a group with the same name as the user")
    non_unique: bool = Field(default=False, description="allow to create users with duplicate (non-unique) UID")
    password: str = Field(default="", description="the encrypted password of the new account")
    system: bool = Field(default=False, description="create a system account")
    shell: str = Field(default="", description="the login shell of the new account")
    uid: int = Field(default=0, description="the user ID of the new account")
    user_group: bool = Field(default=False, description="create a group with the same name as the user")
    selinux_user: str = Field(default="", description="the specific SEUSER for the SELinux user mapping")
    selinux_range: str = Field(default="", description="the specific MLS range for the SELinux user mapping")


class AccountCreationResult(BaseModel):
    """Outcome of a useradd invocation."""

    success: bool = Field(description="whether the user was added successfully")
    message: str = Field(description="a message indicating the result of the operation")
