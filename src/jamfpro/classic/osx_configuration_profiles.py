r"""Classic API macOS configuration profiles
(``/osxconfigurationprofiles``)."""

from __future__ import annotations

__all__ = [
    "DistributionMethod",
    "ListOSXConfigurationProfile",
    "ListOSXConfigurationProfiles",
    "OSXConfigurationProfile",
    "OSXConfigurationProfileGeneral",
    "OSXConfigurationProfileScope",
    "OSXConfigurationProfileScopeExclusions",
    "OSXConfigurationProfileScopeLimitations",
    "OSXConfigurationProfileSelfService",
    "OSXConfigurationProfilesService",
    "ProfileLevel",
    "RedeployOnUpdate",
    "RemovalDisallowed",
    "ScopeLimitationUser",
    "ScopeLimitationUserGroup",
    "ScopeUser",
    "ScopeUserGroup",
    "SelfServiceSecurity",
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
    Site,
)


class DistributionMethod(str, Enum):
    INSTALL_AUTOMATICALLY = "Install Automatically"
    MAKE_AVAILABLE_IN_SELF_SERVICE = "Make Available in Self Service"


class ProfileLevel(str, Enum):
    SYSTEM = "System"
    USER = "User"


class RedeployOnUpdate(str, Enum):
    NEWLY_ASSIGNED = "Newly Assigned"
    ALL = "All"


class RemovalDisallowed(str, Enum):
    ALWAYS = "Always"
    NEVER = "Never"
    WITH_AUTHORIZATION = "With Authorization"


@dataclass
class OSXConfigurationProfileGeneral:
    id: int | None = None
    name: str | None = None
    description: str | None = None
    site: Site | None = None
    category: GeneralCategory | None = None
    distribution_method: DistributionMethod | None = None
    user_removable: bool | None = None
    level: ProfileLevel | None = None
    uuid: str | None = None
    redeploy_on_update: RedeployOnUpdate | None = None
    # The mobileconfig plist, as an escaped XML string
    payloads: str | None = None


@dataclass
class ScopeUser:
    id: int | None = None
    name: str | None = None


@dataclass
class ScopeUserGroup:
    id: int | None = None
    name: str | None = None


@dataclass
class ScopeLimitationUser:
    name: str | None = None


@dataclass
class ScopeLimitationUserGroup:
    name: str | None = None


@dataclass
class OSXConfigurationProfileScopeLimitations:
    users: list[ScopeLimitationUser] | None = field(default=None, metadata={"xml": "users>user"})
    user_groups: list[ScopeLimitationUserGroup] | None = field(
        default=None, metadata={"xml": "user_groups>user_group"}
    )
    network_segments: list[ScopeNetworkSegment] | None = field(
        default=None, metadata={"xml": "network_segments>network_segment"}
    )
    ibeacons: list[ScopeIbeacon] | None = field(default=None, metadata={"xml": "ibeacons>ibeacon"})


@dataclass
class OSXConfigurationProfileScopeExclusions:
    computers: list[ScopeComputer] | None = field(default=None, metadata={"xml": "computers>computer"})
    computer_groups: list[ScopeComputerGroup] | None = field(
        default=None, metadata={"xml": "computer_groups>computer_group"}
    )
    buildings: list[Building] | None = field(default=None, metadata={"xml": "buildings>building"})
    departments: list[Department] | None = field(
        default=None, metadata={"xml": "departments>department"}
    )
    users: list[ScopeUser] | None = field(default=None, metadata={"xml": "jss_users>user"})
    user_groups: list[ScopeUserGroup] | None = field(
        default=None, metadata={"xml": "jss_user_groups>user_group"}
    )
    network_segments: list[ScopeNetworkSegment] | None = field(
        default=None, metadata={"xml": "network_segments>network_segment"}
    )
    ibeacons: list[ScopeIbeacon] | None = field(default=None, metadata={"xml": "ibeacons>ibeacon"})


@dataclass
class OSXConfigurationProfileScope:
    all_computers: bool | None = None
    all_jss_users: bool | None = None
    computers: list[ScopeComputer] | None = field(default=None, metadata={"xml": "computers>computer"})
    computer_groups: list[ScopeComputerGroup] | None = field(
        default=None, metadata={"xml": "computer_groups>computer_group"}
    )
    buildings: list[Building] | None = field(default=None, metadata={"xml": "buildings>building"})
    departments: list[Department] | None = field(
        default=None, metadata={"xml": "departments>department"}
    )
    jss_users: list[ScopeUser] | None = field(default=None, metadata={"xml": "jss_users>user"})
    jss_user_groups: list[ScopeUserGroup] | None = field(
        default=None, metadata={"xml": "jss_user_groups>user_group"}
    )
    limitations: OSXConfigurationProfileScopeLimitations | None = None
    exclusions: OSXConfigurationProfileScopeExclusions | None = None


@dataclass
class SelfServiceSecurity:
    removal_disallowed: RemovalDisallowed | None = None


@dataclass
class OSXConfigurationProfileSelfService:
    self_service_display_name: str | None = None
    install_button_text: str | None = None
    self_service_description: str | None = None
    force_users_to_view_description: bool | None = None
    security: SelfServiceSecurity | None = None
    feature_on_main_page: bool | None = None
    self_service_categories: list[SelfServiceCategory] | None = field(
        default=None, metadata={"xml": "self_service_categories>category"}
    )


@dataclass
class OSXConfigurationProfile:
    general: OSXConfigurationProfileGeneral | None = None
    scope: OSXConfigurationProfileScope | None = None
    self_service: OSXConfigurationProfileSelfService | None = None


@dataclass
class ListOSXConfigurationProfile:
    id: int | None = None
    name: str | None = None


@dataclass
class ListOSXConfigurationProfiles:
    size: int | None = None
    os_x_configuration_profiles: list[ListOSXConfigurationProfile] | None = field(
        default=None, metadata={"xml": "os_x_configuration_profile"}
    )


class OSXConfigurationProfilesService(
    ClassicService[OSXConfigurationProfile, ListOSXConfigurationProfiles]
):
    path = "/osxconfigurationprofiles"
    root_tag = "os_x_configuration_profile"
    model = OSXConfigurationProfile
    list_model = ListOSXConfigurationProfiles

    @staticmethod
    def _check(operation: str, profile: OSXConfigurationProfile | None) -> OSXConfigurationProfileGeneral:
        prefix = f"OSXConfigurationProfilesService.{operation}()"
        if profile is None:
            msg = f"{prefix}: cannot {operation} None OSX configuration profile"
            raise ValueError(msg)
        if profile.general is None:
            msg = f"{prefix}: cannot {operation} OSX configuration profile with None general"
            raise ValueError(msg)
        if profile.general.name is None:
            msg = f"{prefix}: cannot {operation} OSX configuration profile with None name of general"
            raise ValueError(msg)
        return profile.general

    def create(self, profile: OSXConfigurationProfile) -> int | None:
        """Create a configuration profile and return its ID.

        Raises:
            ValueError: If ``general`` or ``general.name`` is missing.
        """
        self._check("create", profile)
        return self._create(profile)

    def get(self, profile_id: int) -> OSXConfigurationProfile:
        return self._get(profile_id)

    def list(self) -> ListOSXConfigurationProfiles:
        return self._list()

    def update(self, profile: OSXConfigurationProfile) -> None:
        """Replace a configuration profile, identified by ``general.id``."""
        general = self._check("update", profile)
        if general.id is None:
            msg = "OSXConfigurationProfilesService.update(): cannot update OSX configuration profile with None id of general"
            raise ValueError(msg)
        self._update(general.id, profile)

    def delete(self, profile_id: int) -> None:
        self._delete(profile_id)
