"""Configuration objects for the statement builder."""

from dataclasses import dataclass

from sqlgen.observer import StatementObserver, default_statement_observer

__all__ = ("BuilderConfig",)


@dataclass(slots=True)
class BuilderConfig:
    """Observability toggles applied on every ``build()``."""

    print_sql: "bool | None" = None
    statement_observers: "tuple[StatementObserver, ...] | None" = None

    def __post_init__(self) -> None:
        if self.statement_observers is not None:
            self.statement_observers = tuple(self.statement_observers)

    def copy(self) -> "BuilderConfig":
        """Return a copy to avoid sharing mutable state."""

        observers = tuple(self.statement_observers) if self.statement_observers else None
        return BuilderConfig(print_sql=self.print_sql, statement_observers=observers)

    @classmethod
    def merge(cls, base_config: "BuilderConfig | None", override_config: "BuilderConfig | None") -> "BuilderConfig":
        """Merge two configurations; observers concatenate, ``print_sql`` is overridden when set."""

        if base_config is None and override_config is None:
            return cls()

        base = base_config.copy() if base_config else cls()
        override = override_config
        if override is None:
            return base

        observers: "tuple[StatementObserver, ...] | None"
        if base.statement_observers and override.statement_observers:
            observers = base.statement_observers + tuple(override.statement_observers)
        elif override.statement_observers:
            observers = tuple(override.statement_observers)
        else:
            observers = base.statement_observers

        print_sql = base.print_sql
        if override.print_sql is not None:
            print_sql = override.print_sql

        return BuilderConfig(print_sql=print_sql, statement_observers=observers)

    @property
    def observers(self) -> "tuple[StatementObserver, ...]":
        """Observers to notify, including the logging observer when ``print_sql`` is on."""

        observers = self.statement_observers or ()
        if self.print_sql:
            return (default_statement_observer, *observers)
        return observers
