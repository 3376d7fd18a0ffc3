"""Resource injection into annotated object members.

Walks a target's class hierarchy and writes resolved, converted resources
into its annotated fields and setters.
"""

from typing import Any, Optional

from infrastructure.logging import get_module_logger
from infrastructure.resources.members import (
    AnnotatedMember,
    IntrospectionMemberSource,
    MemberSource,
    ancestor_chain,
)
from infrastructure.resources.resolver import ResourceResolver
from infrastructure.resources.result import ResolutionStatus

logger = get_module_logger()


class ResourceInjector:
    """Injects resources into objects using a lenient failure policy.

    For each member the injector resolves the effective key with the
    member's arguments under the default locale and converts it to the
    member's type:

    - found and converted: the value is written
    - missing with a declared default: the default is converted and written
    - missing without a default: the member is left untouched
    - found but not convertible: the member is left untouched

    Classes are visited from the root ancestor down to the concrete type.
    A failure on one member never stops the remaining members. A declared
    default that cannot be converted is a configuration error and raises
    ConversionError.

    Attributes:
        resolver: ResourceResolver performing lookups and conversions.
        member_source: MemberSource enumerating annotated members per class.
    """

    def __init__(
        self,
        resolver: ResourceResolver,
        member_source: Optional[MemberSource] = None,
    ):
        self.resolver = resolver
        self.member_source = member_source or IntrospectionMemberSource()

    def inject(self, target: Any) -> None:
        """Populate every annotated member of target in place.

        Args:
            target: Object whose class and ancestor classes are scanned.

        Raises:
            ConversionError: If a declared default cannot be converted to
                its member's type.
        """
        injected = 0
        skipped = 0
        # Root first, so a subclass redeclaring a field has the last word
        for owner in reversed(ancestor_chain(type(target))):
            for member in self.member_source.members_of(owner):
                if self._inject_member(target, member):
                    injected += 1
                else:
                    skipped += 1

        logger.debug(
            "resources_injected",
            target_type=type(target).__qualname__,
            injected=injected,
            skipped=skipped,
        )

    def _inject_member(self, target: Any, member: AnnotatedMember) -> bool:
        key = member.key
        result = self.resolver.try_resolve_converted(
            key, member.target_type, args=member.metadata.args
        )

        if result.is_success:
            member.write(target, result.value)
            return True

        if (
            result.status == ResolutionStatus.NOT_FOUND
            and member.metadata.default is not None
        ):
            value = self.resolver.converters.convert(
                member.metadata.default, member.target_type
            )
            member.write(target, value)
            return True

        logger.debug(
            "injection_member_skipped",
            key=key,
            member=f"{member.owner.__qualname__}.{member.name}",
            status=result.status.value,
            error=str(result.error),
        )
        return False
