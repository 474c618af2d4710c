"""
Grammar registry: the declared positionals and options of a program.

The registry checks every declaration as it is added, so a grammar that was
built without raising is always consistent. Build it fully before the first
parse call and treat it as read-only from then on.
"""

import logging

from parseargs.core.errors import (
    DuplicateLongNameError,
    DuplicateShortNameError,
    DuplicateUidError,
    InvalidLongNameError,
    InvalidRangeError,
    InvalidShortNameError,
    UnknownUidError,
)
from parseargs.core.models import (
    HELP_LONG_NAME,
    HELP_SHORT_NAME,
    HELP_UID,
    Option,
    Positional,
    help_option,
)

logger = logging.getLogger(__name__)


class Grammar:
    """
    Ordered positionals plus options, with uniqueness enforced on insert.

    Options are kept in registration order, except for the help flag which
    is always first so it wins when matching.
    """

    def __init__(self) -> None:
        self._positionals: list[Positional] = []
        self._options: list[Option] = []
        self._double_dash = False
        self._help = False

    @property
    def positionals(self) -> tuple[Positional, ...]:
        return tuple(self._positionals)

    @property
    def options(self) -> tuple[Option, ...]:
        return tuple(self._options)

    @property
    def double_dash_enabled(self) -> bool:
        return self._double_dash

    @property
    def help_enabled(self) -> bool:
        return self._help

    def add_positional(self, uid: str, name: str, description: str = "") -> Positional:
        """
        Register a positional at the next free index.

        Args:
            uid: Identifier for the positional (separate namespace from options)
            name: Name shown in usage/help
            description: Help text

        Returns:
            The registered Positional

        Raises:
            DuplicateUidError: If a positional with this uid already exists
        """
        if any(p.uid == uid for p in self._positionals):
            raise DuplicateUidError(f"A positional with uid '{uid}' already exists.")

        positional = Positional(
            uid=uid, index=len(self._positionals), name=name, description=description
        )
        self._positionals.append(positional)
        logger.debug("Registered positional %r at index %d", uid, positional.index)
        return positional

    def add_option(
        self,
        uid: str,
        short_name: str,
        long_name: str,
        min_values: int = 0,
        max_values: int = 0,
        param_hint: str = "",
        description: str = "",
    ) -> Option:
        """
        Register an option.

        Args:
            uid: Identifier for the option (separate namespace from positionals)
            short_name: Single character used as ``-x``, or "" for none
            long_name: Name used as ``--name``
            min_values: Fewest values the option accepts (0 for a flag)
            max_values: Most values the option accepts, at least min_values
            param_hint: Placeholder for the values, shown in help
            description: Help text

        Returns:
            The registered Option

        Raises:
            InvalidShortNameError: If short_name is longer than one character
            InvalidLongNameError: If long_name is empty
            DuplicateUidError: If uid is already used by an option
            DuplicateShortNameError: If short_name is already used
            DuplicateLongNameError: If long_name is already used
            InvalidRangeError: If the value range is negative or inverted
        """
        if len(short_name) > 1:
            raise InvalidShortNameError(
                f"A short name cannot have more than one character: '{short_name}'."
            )
        if not long_name:
            raise InvalidLongNameError(f"Option '{uid}' needs a non-empty long name.")
        self._check_collisions(uid, short_name, long_name)
        if min_values < 0:
            raise InvalidRangeError(
                f"min_values of option '{uid}' cannot be negative (got {min_values})."
            )
        if max_values < min_values:
            raise InvalidRangeError(
                f"max_values of option '{uid}' has to be at least min_values: "
                f"{max_values} < {min_values}."
            )

        option = Option(
            uid=uid,
            short_name=short_name,
            long_name=long_name,
            min_values=min_values,
            max_values=max_values,
            param_hint=param_hint,
            description=description,
        )
        self._options.append(option)
        logger.debug(
            "Registered option %r (-%s, --%s, %d..%d values)",
            uid,
            short_name,
            long_name,
            min_values,
            max_values,
        )
        return option

    def enable_double_dash(self) -> None:
        """Treat a bare ``--`` as the end of options."""
        self._double_dash = True

    def enable_help(self) -> Option:
        """
        Register the reserved ``-h``/``--help`` flag.

        Once enabled, a parse that sees the flag discards everything else.

        Raises:
            DuplicateUidError, DuplicateShortNameError, DuplicateLongNameError:
                If the reserved names are already taken
        """
        self._check_collisions(HELP_UID, HELP_SHORT_NAME, HELP_LONG_NAME)
        option = help_option()
        self._options.insert(0, option)
        self._help = True
        return option

    def positional(self, uid: str) -> Positional:
        """Return the positional registered as uid."""
        for p in self._positionals:
            if p.uid == uid:
                return p
        raise UnknownUidError(f"Unknown positional '{uid}'.")

    def option(self, uid: str) -> Option:
        """Return the option registered as uid."""
        for o in self._options:
            if o.uid == uid:
                return o
        raise UnknownUidError(f"Unknown option '{uid}'.")

    def index_of(self, uid: str) -> int:
        return self.positional(uid).index

    def name_of(self, uid: str) -> str:
        return self.positional(uid).name

    def short_name_of(self, uid: str) -> str:
        return self.option(uid).short_name

    def long_name_of(self, uid: str) -> str:
        return self.option(uid).long_name

    def _check_collisions(self, uid: str, short_name: str, long_name: str) -> None:
        for o in self._options:
            if o.uid == uid:
                raise DuplicateUidError(f"An option with uid '{uid}' already exists.")
            if short_name and o.short_name == short_name:
                raise DuplicateShortNameError(
                    f"An option with short name '{short_name}' already exists."
                )
            if o.long_name == long_name:
                raise DuplicateLongNameError(
                    f"An option with long name '{long_name}' already exists."
                )
