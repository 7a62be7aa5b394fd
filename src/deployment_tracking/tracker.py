"""Main API for deployment-tracking library."""

import logging
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

from eth_utils import to_normalized_address

from .constants import PATH_SEPARATOR
from .exceptions import DatabaseIOError, DatabaseNotFoundError, SerializationError
from .hashing import derive_chain_key, derive_contract_key
from .paths import get_tracking_file
from .store import load_document, read_path, save_document, upsert_path
from .types import DeploymentRecord, ProjectConfig

logger = logging.getLogger(__name__)

BlockHash = Union[bytes, str]


class DeploymentTracker:
    """
    Tracks which on-chain deployments correspond to which built contracts.

    Records live in a single document per project, keyed by a digest of the
    chain's block hash and then by a digest of the contract's name, bytecode
    and constructor arguments. Every mutation loads and rewrites the whole
    document; concurrent writers need external locking.
    """

    def __init__(self, config: ProjectConfig):
        """
        Initialize the tracker.

        Args:
            config: Project configuration (only project_path is used)
        """
        self.config = config

    @property
    def tracking_file(self) -> Path:
        return get_tracking_file(self.config.project_path)

    def database_exists(self) -> bool:
        """
        Check if the tracking database file is present.

        Returns:
            True if the backing file exists, False otherwise
        """
        return self.tracking_file.exists()

    def create_database(self) -> None:
        """
        Create an empty tracking database.

        An existing database at the same location is truncated.

        Raises:
            DatabaseIOError: If the file cannot be created
        """
        tracking_file = self.tracking_file
        try:
            tracking_file.parent.mkdir(parents=True, exist_ok=True)
            tracking_file.write_text("", encoding="utf-8")
        except OSError as e:
            raise DatabaseIOError(
                f"Couldn't create tracking database at {tracking_file}: {e}"
            ) from e

        logger.debug("Created tracking database at %s", tracking_file)

    def ensure_database(self) -> bool:
        """
        Create the tracking database only if it does not exist yet.

        Returns:
            True if the database was created, False if it already existed
        """
        if self.database_exists():
            return False
        self.create_database()
        return True

    def track(
        self,
        block_hash: BlockHash,
        name: str,
        byte_code: str,
        args: Sequence[str],
        address: str,
    ) -> None:
        """
        Record a deployment, overwriting any earlier record for the same contract.

        Args:
            block_hash: Hash identifying the chain (bytes or 0x-hex)
            name: Contract name
            byte_code: Contract bytecode
            args: Constructor arguments
            address: Deployed contract address

        Raises:
            ValueError: If block_hash or address is malformed
            DatabaseNotFoundError: If the database has not been created
            DatabaseIOError: If the database cannot be read or written
            FormatError: If the database document is malformed
            InsertionError: If the record path conflicts with the document structure
        """
        chain_key = derive_chain_key(block_hash)
        contract_key = derive_contract_key(name, byte_code, args)
        record = DeploymentRecord(name=name, address=to_normalized_address(address))

        tracking_data = load_document(self.tracking_file)
        query = f"{chain_key}{PATH_SEPARATOR}{contract_key}"
        inserted = upsert_path(tracking_data, query, record.to_dict())

        logger.debug(
            "%s deployment of %s at %s under chain %s",
            "Tracked new" if inserted else "Updated",
            name,
            record.address,
            chain_key,
        )

        save_document(tracking_data, self.tracking_file)

    def get_record(
        self,
        block_hash: BlockHash,
        name: str,
        byte_code: str,
        args: Sequence[str],
    ) -> Optional[DeploymentRecord]:
        """
        Look up the tracked deployment of one contract.

        Args:
            block_hash: Hash identifying the chain (bytes or 0x-hex)
            name: Contract name
            byte_code: Contract bytecode
            args: Constructor arguments

        Returns:
            DeploymentRecord, or None if the contract has not been tracked

        Raises:
            DatabaseNotFoundError: If the database has not been created
            SerializationError: If the stored value is not a deployment record
        """
        chain_key = derive_chain_key(block_hash)
        contract_key = derive_contract_key(name, byte_code, args)

        tracking_data = load_document(self.tracking_file)
        contract_data = read_path(tracking_data, f"{chain_key}{PATH_SEPARATOR}{contract_key}")
        if contract_data is None:
            return None

        return DeploymentRecord.from_dict(contract_data)

    def get_all_for_chain(
        self, block_hash: BlockHash
    ) -> Optional[Dict[str, DeploymentRecord]]:
        """
        Get every tracked deployment for a chain.

        A missing database is treated the same as a chain with no deployments.

        Args:
            block_hash: Hash identifying the chain (bytes or 0x-hex)

        Returns:
            Mapping of contract key -> DeploymentRecord, or None if nothing is tracked

        Raises:
            SerializationError: If the chain entry is not a mapping of records
        """
        chain_key = derive_chain_key(block_hash)

        try:
            tracking_data = load_document(self.tracking_file)
        except DatabaseNotFoundError:
            return None

        chain_data = read_path(tracking_data, chain_key)
        if chain_data is None:
            return None
        if not isinstance(chain_data, dict):
            raise SerializationError(
                f"Expected a table of deployments for chain {chain_key}, "
                f"got {type(chain_data).__name__}"
            )

        return {
            contract_key: DeploymentRecord.from_dict(contract_data)
            for contract_key, contract_data in chain_data.items()
        }
