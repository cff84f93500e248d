"""
Software mention ledger.

This module counts how often each software item is mentioned per platform
across a set of survey rows.
"""

from ..models import ALL_PLATFORMS, Platform, SoftwareEntry, SortDirection
from ..normalize import is_no_data, software_key

_COUNTER_FOR = {
    Platform.WINDOWS: "windows_count",
    Platform.LINUX: "linux_count",
    Platform.RECOMMENDED: "recommended_count",
}


class SoftwareLedger:
    """
    Builds, merges and sorts lists of SoftwareEntry.

    KEYING:
    Entries are identified by software_key(name): diacritics stripped,
    whitespace collapsed, lowercased, punctuation kept. "MATLAB", "Matlab "
    and "matlab" are one entry; "C" and "C++" are two. The display name is
    the trimmed text of the first mention seen.

    NO-DATA ANSWERS:
    A blank field, "Ninguno" or "Ninguna" (any casing) contributes nothing.

    All methods return new lists of new entries. Input entries are never
    modified, so partial ledgers can be merged in any order.
    """

    @staticmethod
    def split_mentions(text: str) -> list:
        """Trimmed, non-empty software tokens from one answer."""
        if is_no_data(text):
            return []
        return [token.strip() for token in text.split(",") if token.strip()]

    def accumulate(self, rows, platforms=ALL_PLATFORMS) -> list:
        """
        Count software mentions across rows.

        Args:
            rows: Iterable of SurveyRow
            platforms: Which answers to read (default: all three)

        Returns:
            List of SoftwareEntry in first-seen order
        """
        ledger = {}
        for row in rows:
            for platform in platforms:
                counter = _COUNTER_FOR[platform]
                for token in self.split_mentions(platform.read(row)):
                    key = software_key(token)
                    entry = ledger.get(key)
                    if entry is None:
                        entry = SoftwareEntry(name=token)
                        ledger[key] = entry
                    setattr(entry, counter, getattr(entry, counter) + 1)
        return list(ledger.values())

    def merge(self, a: list, b: list) -> list:
        """
        Combine two ledgers.

        Counts are added for matching keys; keys found in only one ledger are
        carried over. The display name and the order come from `a` first,
        then new keys from `b` in their order.
        """
        merged = {}
        for entry in list(a) + list(b):
            key = software_key(entry.name)
            existing = merged.get(key)
            if existing is None:
                merged[key] = entry.copy()
            else:
                existing.windows_count += entry.windows_count
                existing.linux_count += entry.linux_count
                existing.recommended_count += entry.recommended_count
        return list(merged.values())

    def sort_by_total_mentions(self, entries: list, direction: SortDirection = SortDirection.DESC) -> list:
        """
        Order entries by Windows + Linux + recommended mentions.

        The sort is stable with no secondary key: tied entries keep their
        relative order in either direction.
        """
        if direction is SortDirection.DESC:
            return sorted(entries, key=lambda e: -e.total)
        return sorted(entries, key=lambda e: e.total)

    @staticmethod
    def distinct_keys(entries) -> set:
        return {software_key(entry.name) for entry in entries}

    def distinct_names(self, rows, platforms=ALL_PLATFORMS) -> list:
        """
        Distinct software display names mentioned in rows.

        First-seen casing wins. Returned in case-insensitive alphabetical
        order, the way the report lists them.
        """
        names = [entry.name for entry in self.accumulate(rows, platforms)]
        return sorted(names, key=lambda name: (name.lower(), name))
