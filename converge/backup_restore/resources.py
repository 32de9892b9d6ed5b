from dataclasses import dataclass

from converge.logging import LoggerStream
from converge.verify import ResourceCheck, ResourceKind, VerificationReport, verify_all

from .clients import ManagementClient


@dataclass(slots=True, frozen=True)
class CreatedResource:
    id: str
    name: str


async def verify_rancher_resources(
    client: ManagementClient,
    users: list[CreatedResource],
    projects: list[CreatedResource],
    roles: list[CreatedResource],
    logger: LoggerStream | None = None,
) -> VerificationReport:
    """
    Check that every user (by name), project and role template (by id)
    created before a backup still exists. Returns the full report; call
    ``report.raise_for_failures()`` to turn failures into one error.
    """
    checks = [
        ResourceCheck(
            kind=ResourceKind.USER,
            identifier=user.name,
            lookup=client.get_user_id_by_name,
        )
        for user in users
    ]

    checks.extend(
        ResourceCheck(
            kind=ResourceKind.PROJECT,
            identifier=project.id,
            lookup=client.project_by_id,
        )
        for project in projects
    )

    checks.extend(
        ResourceCheck(
            kind=ResourceKind.ROLE,
            identifier=role.id,
            lookup=client.role_template_by_id,
        )
        for role in roles
    )

    return await verify_all(checks, logger=logger)
