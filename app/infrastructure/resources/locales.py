"""Locale fallback resolution.

Computes the ordered chain of candidate locales tried when looking up a
resource.
"""

from typing import Callable, List, Optional, Tuple, Union

from infrastructure.resources.models import Locale, get_default_locale


class LocaleFallbackResolver:
    """Computes locale candidate chains.

    Fallback chain for a requested locale:
    1. The exact requested locale
    2. Its language only (country and variant stripped)
    3. The process-wide default locale

    Duplicates are dropped keeping the first occurrence. When no locale is
    requested, the chain holds only the default locale.
    """

    def __init__(self, default_locale: Optional[Callable[[], Locale]] = None):
        """Initialize fallback resolver.

        Args:
            default_locale: Callable returning the default locale; defaults
                to the process-wide get_default_locale.
        """
        self._default_locale = default_locale or get_default_locale

    @property
    def default_locale(self) -> Locale:
        return self._default_locale()

    def candidates(
        self, locale: Union[Locale, str, None] = None
    ) -> Tuple[Locale, ...]:
        """Return the candidate chain for a requested locale.

        Args:
            locale: Requested locale, a locale tag, or None for the default.

        Returns:
            Non-empty tuple of locales in lookup order.
        """
        default = self._default_locale()
        if locale is None:
            return (default,)

        requested = Locale.coerce(locale)
        chain: List[Locale] = []
        for candidate in (requested, requested.language_only(), default):
            if candidate not in chain:
                chain.append(candidate)
        return tuple(chain)
