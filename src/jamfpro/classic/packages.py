r"""Classic API packages (``/packages``).

Only the package metadata is managed here. The package file itself is
uploaded through ``jamfpro.informal.distribution_file_upload``.
"""

from __future__ import annotations

__all__ = ["ListPackage", "ListPackages", "Package", "PackagesService", "RequiredProcessor"]

from dataclasses import dataclass, field
from enum import Enum

from jamfpro.classic.common import ClassicService


class RequiredProcessor(str, Enum):
    NONE = "None"
    PPC = "ppc"
    X86 = "x86"


@dataclass
class Package:
    id: int | None = None
    name: str | None = None
    category: str | None = None
    filename: str | None = None
    info: str | None = None
    notes: str | None = None
    priority: int | None = None
    reboot_required: bool | None = None
    fill_user_template: bool | None = None
    fill_existing_users: bool | None = None
    allow_uninstalled: bool | None = None
    os_requirements: str | None = None
    required_processor: RequiredProcessor | None = None
    hash_type: str | None = None
    hash_value: str | None = None
    switch_with_package: str | None = None
    install_if_reported_available: bool | None = None
    reinstall_option: str | None = None
    triggering_files: str | None = None
    send_notification: bool | None = None


@dataclass
class ListPackage:
    id: int | None = None
    name: str | None = None


@dataclass
class ListPackages:
    size: int | None = None
    packages: list[ListPackage] | None = field(default=None, metadata={"xml": "package"})


class PackagesService(ClassicService[Package, ListPackages]):
    path = "/packages"
    root_tag = "package"
    model = Package
    list_model = ListPackages

    def create(self, package: Package) -> int | None:
        """Create a package and return its ID.

        Raises:
            ValueError: If ``name`` or ``filename`` is missing.
        """
        if package is None:
            msg = "PackagesService.create(): cannot create None package"
            raise ValueError(msg)
        if package.name is None:
            msg = "PackagesService.create(): cannot create package with None name"
            raise ValueError(msg)
        if package.filename is None:
            msg = "PackagesService.create(): cannot create package with None filename"
            raise ValueError(msg)
        return self._create(package)

    def get(self, package_id: int) -> Package:
        return self._get(package_id)

    def list(self) -> ListPackages:
        return self._list()

    def update(self, package: Package) -> None:
        if package is None:
            msg = "PackagesService.update(): cannot update None package"
            raise ValueError(msg)
        if package.id is None:
            msg = "PackagesService.update(): cannot update package with None id"
            raise ValueError(msg)
        self._update(package.id, package)

    def delete(self, package_id: int) -> None:
        self._delete(package_id)
