r"""Classic API policies (``/policies``).

A policy document is split in sections (``general``, ``scope``,
``self_service``...). Every section is optional on update; only
``general.name`` is required on creation.

Dates of ``date_time_limitations`` are kept as the strings the server
sends (``2024-01-31 09:00:00`` and ``2024-01-31T09:00:00.000+0000``),
alongside their epoch in milliseconds.
"""

from __future__ import annotations

__all__ = [
    "DockItemAction",
    "Frequency",
    "ListPolicies",
    "ListPolicy",
    "MinimumNetworkConnection",
    "NetworkRequirements",
    "NoUserLoggedIn",
    "PackageAction",
    "PoliciesService",
    "Policy",
    "PolicyDateTimeLimitations",
    "PolicyDockItem",
    "PolicyDockItems",
    "PolicyFilesProcesses",
    "PolicyGeneral",
    "PolicyMaintenance",
    "PolicyNetworkLimitations",
    "PolicyOverrideDefaultSettings",
    "PolicyPackage",
    "PolicyPackageConfiguration",
    "PolicyPackages",
    "PolicyPrinter",
    "PolicyPrinters",
    "PolicyReboot",
    "PolicyScope",
    "PolicyScopeExclusions",
    "PolicyScopeLimitations",
    "PolicyScript",
    "PolicyScripts",
    "PolicySelfService",
    "PrinterAction",
    "RetryEvent",
    "ScopeUser",
    "ScopeUserGroup",
    "ScriptPriority",
    "Trigger",
    "UserLoggedIn",
]

from dataclasses import dataclass, field
from enum import Enum

from jamfpro.classic.common import (
    Building,
    ClassicService,
    Department,
    GeneralCategory,
    ScopeComputer,
    ScopeComputerGroup,
    ScopeIbeacon,
    ScopeNetworkSegment,
    SelfServiceCategory,
    SelfServiceIcon,
    Site,
)


class Trigger(str, Enum):
    EVENT = "EVENT"
    USER_INITIATED = "USER_INITIATED"


class Frequency(str, Enum):
    ONCE_PER_COMPUTER = "Once per computer"
    ONCE_PER_USER_PER_COMPUTER = "Once per user per computer"
    ONCE_PER_USER = "Once per user"
    ONCE_EVERY_DAY = "Once every day"
    ONCE_EVERY_WEEK = "Once every week"
    ONCE_EVERY_MONTH = "Once every month"
    ONGOING = "Ongoing"


class RetryEvent(str, Enum):
    NONE = "none"
    TRIGGER = "trigger"
    CHECK_IN = "check-in"


class MinimumNetworkConnection(str, Enum):
    NO_MINIMUM = "No Minimum"
    ETHERNET = "Ethernet"


class NetworkRequirements(str, Enum):
    ANY = "Any"
    ETHERNET = "Ethernet"


class PackageAction(str, Enum):
    INSTALL = "Install"
    CACHE = "Cache"
    INSTALL_CACHED = "Install Cached"


class ScriptPriority(str, Enum):
    BEFORE = "Before"
    AFTER = "After"


class PrinterAction(str, Enum):
    INSTALL = "install"
    UNINSTALL = "uninstall"


class DockItemAction(str, Enum):
    ADD_TO_BEGINNING = "Add To Beginning"
    ADD_TO_END = "Add To End"
    REMOVE = "Remove"


class NoUserLoggedIn(str, Enum):
    DO_NOT_RESTART = "Do not restart"
    RESTART_IMMEDIATELY = "Restart immediately"
    RESTART_IF_REQUIRED = "Restart if a package or update requires it"


class UserLoggedIn(str, Enum):
    DO_NOT_RESTART = "Do not restart"
    RESTART = "Restart"
    RESTART_IMMEDIATELY = "Restart immediately"
    RESTART_IF_REQUIRED = "Restart if a package or update requires it"


@dataclass
class PolicyDateTimeLimitations:
    activation_date: str | None = None
    activation_date_epoch: int | None = None
    activation_date_utc: str | None = None
    expiration_date: str | None = None
    expiration_date_epoch: int | None = None
    expiration_date_utc: str | None = None
    # Sun, Mon, Tue...
    no_execute_on: list[str] | None = field(default=None, metadata={"xml": "no_execute_on>day"})
    no_execute_start: str | None = None
    no_execute_end: str | None = None


@dataclass
class PolicyNetworkLimitations:
    minimum_network_connection: MinimumNetworkConnection | None = None
    any_ip_address: bool | None = None


@dataclass
class PolicyOverrideDefaultSettings:
    target_drive: str | None = None
    distribution_point: str | None = None
    force_afp_smb: bool | None = None
    sus: str | None = None


@dataclass
class PolicyGeneral:
    id: int | None = None
    name: str | None = None
    enabled: bool | None = None
    trigger: Trigger | None = None
    trigger_checkin: bool | None = None
    trigger_enrollment_complete: bool | None = None
    trigger_login: bool | None = None
    trigger_network_state_changed: bool | None = None
    trigger_startup: bool | None = None
    trigger_other: str | None = None
    frequency: Frequency | None = None
    retry_event: RetryEvent | None = None
    retry_attempts: int | None = None
    notify_on_each_failed_retry: bool | None = None
    location_user_only: bool | None = None
    target_drive: str | None = None
    offline: bool | None = None
    category: GeneralCategory | None = None
    date_time_limitations: PolicyDateTimeLimitations | None = None
    network_limitations: PolicyNetworkLimitations | None = None
    override_default_settings: PolicyOverrideDefaultSettings | None = None
    network_requirements: NetworkRequirements | None = None
    site: Site | None = None


@dataclass
class ScopeUser:
    name: str | None = None


@dataclass
class ScopeUserGroup:
    # Sent as a string by the server
    id: str | None = None
    name: str | None = None


@dataclass
class PolicyScopeLimitations:
    users: list[ScopeUser] | None = field(default=None, metadata={"xml": "users>user"})
    user_groups: list[ScopeUserGroup] | None = field(
        default=None, metadata={"xml": "user_groups>user_group"}
    )
    network_segments: list[ScopeNetworkSegment] | None = field(
        default=None, metadata={"xml": "network_segments>network_segment"}
    )
    ibeacons: list[ScopeIbeacon] | None = field(default=None, metadata={"xml": "ibeacons>ibeacon"})


@dataclass
class PolicyScopeExclusions:
    computers: list[ScopeComputer] | None = field(default=None, metadata={"xml": "computers>computer"})
    computer_groups: list[ScopeComputerGroup] | None = field(
        default=None, metadata={"xml": "computer_groups>computer_group"}
    )
    buildings: list[Building] | None = field(default=None, metadata={"xml": "buildings>building"})
    departments: list[Department] | None = field(
        default=None, metadata={"xml": "departments>department"}
    )
    users: list[ScopeUser] | None = field(default=None, metadata={"xml": "users>user"})
    user_groups: list[ScopeUserGroup] | None = field(
        default=None, metadata={"xml": "user_groups>user_group"}
    )
    network_segments: list[ScopeNetworkSegment] | None = field(
        default=None, metadata={"xml": "network_segments>network_segment"}
    )
    ibeacons: list[ScopeIbeacon] | None = field(default=None, metadata={"xml": "ibeacons>ibeacon"})


@dataclass
class PolicyScope:
    all_computers: bool | None = None
    computers: list[ScopeComputer] | None = field(default=None, metadata={"xml": "computers>computer"})
    computer_groups: list[ScopeComputerGroup] | None = field(
        default=None, metadata={"xml": "computer_groups>computer_group"}
    )
    buildings: list[Building] | None = field(default=None, metadata={"xml": "buildings>building"})
    departments: list[Department] | None = field(
        default=None, metadata={"xml": "departments>department"}
    )
    limitations: PolicyScopeLimitations | None = None
    exclusions: PolicyScopeExclusions | None = None


@dataclass
class PolicySelfService:
    """Self Service section of a policy.

    ``notification`` holds the two ``<notification>`` elements the
    server uses for the enabled flag and the type, e.g.
    ``["true", "Self Service"]``.
    """

    use_for_self_service: bool | None = None
    self_service_display_name: str | None = None
    install_button_text: str | None = None
    reinstall_button_text: str | None = None
    self_service_description: str | None = None
    force_users_to_view_description: bool | None = None
    self_service_icon: SelfServiceIcon | None = None
    feature_on_main_page: bool | None = None
    self_service_categories: list[SelfServiceCategory] | None = field(
        default=None, metadata={"xml": "self_service_categories>category"}
    )
    notification: list[str] | None = None
    notification_subject: str | None = None
    notification_message: str | None = None


@dataclass
class PolicyPackage:
    id: int | None = None
    name: str | None = None
    action: PackageAction | None = None
    fill_user_templates: bool | None = field(default=None, metadata={"xml": "fut"})
    fill_existing_user_home_directories: bool | None = field(default=None, metadata={"xml": "feu"})


@dataclass
class PolicyPackages:
    size: int | None = None
    packages: list[PolicyPackage] | None = field(default=None, metadata={"xml": "package"})


@dataclass
class PolicyPackageConfiguration:
    packages: PolicyPackages | None = None
    distribution_point: str | None = None


@dataclass
class PolicyScript:
    id: int | None = None
    name: str | None = None
    priority: ScriptPriority | None = None
    parameter4: str | None = None
    parameter5: str | None = None
    parameter6: str | None = None
    parameter7: str | None = None
    parameter8: str | None = None
    parameter9: str | None = None
    parameter10: str | None = None
    parameter11: str | None = None


@dataclass
class PolicyScripts:
    size: int | None = None
    scripts: list[PolicyScript] | None = field(default=None, metadata={"xml": "script"})


@dataclass
class PolicyPrinter:
    id: int | None = None
    name: str | None = None
    action: PrinterAction | None = None
    make_default: bool | None = None


@dataclass
class PolicyPrinters:
    size: int | None = None
    leave_existing_default: str | None = None
    printers: list[PolicyPrinter] | None = field(default=None, metadata={"xml": "printer"})


@dataclass
class PolicyDockItem:
    id: int | None = None
    name: str | None = None
    action: DockItemAction | None = None


@dataclass
class PolicyDockItems:
    size: int | None = None
    dock_items: list[PolicyDockItem] | None = field(default=None, metadata={"xml": "dock_item"})


@dataclass
class PolicyMaintenance:
    recon: bool | None = None
    reset_name: bool | None = None
    install_all_cached_packages: bool | None = None
    heal: bool | None = None
    prebindings: bool | None = None
    permissions: bool | None = None
    byhost: bool | None = None
    system_cache: bool | None = None
    user_cache: bool | None = None
    verify: bool | None = None


@dataclass
class PolicyReboot:
    message: str | None = None
    startup_disk: str | None = None
    specify_startup: str | None = None
    no_user_logged_in: NoUserLoggedIn | None = None
    user_logged_in: UserLoggedIn | None = None
    minutes_until_reboot: int | None = None
    start_reboot_timer_immediately: bool | None = None
    file_vault_2_reboot: bool | None = None


@dataclass
class PolicyFilesProcesses:
    search_by_path: str | None = None
    delete_file: bool | None = None
    locate_file: str | None = None
    update_locate_database: bool | None = None
    spotlight_search: str | None = None
    search_for_process: str | None = None
    kill_process: bool | None = None
    run_command: str | None = None


@dataclass
class Policy:
    general: PolicyGeneral | None = None
    scope: PolicyScope | None = None
    self_service: PolicySelfService | None = None
    package_configuration: PolicyPackageConfiguration | None = None
    scripts: PolicyScripts | None = None
    printers: PolicyPrinters | None = None
    dock_items: PolicyDockItems | None = None
    reboot: PolicyReboot | None = None
    maintenance: PolicyMaintenance | None = None
    files_processes: PolicyFilesProcesses | None = None


@dataclass
class ListPolicy:
    id: int | None = None
    name: str | None = None


@dataclass
class ListPolicies:
    size: int | None = None
    policies: list[ListPolicy] | None = field(default=None, metadata={"xml": "policy"})


class PoliciesService(ClassicService[Policy, ListPolicies]):
    path = "/policies"
    root_tag = "policy"
    model = Policy
    list_model = ListPolicies

    def create(self, policy: Policy) -> int | None:
        """Create a policy and return its ID.

        Raises:
            ValueError: If ``general.name`` is missing.
        """
        if policy is None:
            msg = "PoliciesService.create(): cannot create None policy"
            raise ValueError(msg)
        if policy.general is None or policy.general.name is None:
            msg = "PoliciesService.create(): cannot create policy with None name of general"
            raise ValueError(msg)
        return self._create(policy)

    def get(self, policy_id: int) -> Policy:
        return self._get(policy_id)

    def list(self) -> ListPolicies:
        return self._list()

    def update(self, policy: Policy) -> None:
        """Replace a policy, identified by ``general.id``."""
        if policy is None:
            msg = "PoliciesService.update(): cannot update None policy"
            raise ValueError(msg)
        if policy.general is None or policy.general.id is None:
            msg = "PoliciesService.update(): cannot update policy with None id of general"
            raise ValueError(msg)
        self._update(policy.general.id, policy)

    def delete(self, policy_id: int) -> None:
        self._delete(policy_id)
