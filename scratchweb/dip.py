"""Business logic that depends on an abstract data provider."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod


class DataProvider(ABC):
    """Source of the data the business logic works on."""

    @abstractmethod
    def fetch_data(self) -> str:
        """Return the provider's data as text."""


class FileDataProvider(DataProvider):
    """Provides data said to come from a file."""

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path

    def fetch_data(self) -> str:
        return f"Data from file: {self.file_path}"


class DatabaseDataProvider(DataProvider):
    """Provides data said to come from a database."""

    def __init__(self, connection_string: str) -> None:
        self.connection_string = connection_string

    def fetch_data(self) -> str:
        return f"Data from Databasae: {self.connection_string}"


class BusinessLogic:
    """Processes whatever its provider returns."""

    def __init__(self, provider: DataProvider) -> None:
        self.provider = provider

    def process_data(self) -> str:
        return f"Processed: {self.provider.fetch_data()}"


def main(argv=None) -> None:
    """Run the business logic with a file and a database provider."""
    argparse.ArgumentParser(description="Dependency inversion demo.").parse_args(argv)
    print(BusinessLogic(FileDataProvider("example.txt")).process_data())
    database = DatabaseDataProvider("適当 Server=myServerAddress;Database=myDataBase;User")
    print(BusinessLogic(database).process_data())


if __name__ == "__main__":
    main()