"""Business rules for registering and maintaining pix keys."""

from __future__ import annotations

from pix_keys.config import DEFAULT_KEY_LIMIT_PER_ACCOUNT, PixKeysConfig
from pix_keys.exceptions import (
    BusinessRuleViolation,
    ConfigurationError,
    DuplicateKeyValueError,
    InactiveKeyOverwriteError,
    NotFoundError,
)
from pix_keys.logging import get_logger
from pix_keys.models import AccountType, KeyCategory, PixKey
from pix_keys.store import InMemoryPixKeyStore, JsonFilePixKeyStore, PixKeyStore
from pix_keys.validation import KeyValidatorRegistry, default_registry

logger = get_logger(__name__)

ALREADY_REGISTERED = "key already registered"
LIMIT_REACHED = "per-account key limit reached"
ALREADY_INACTIVE = "key already inactive"
INACTIVE_NOT_UPDATABLE = "key is inactive and cannot be updated"


class PixKeyService:
    """Create, find, inactivate and re-link pix keys.

    The service holds no mutable state of its own. Uniqueness of key values
    is checked up front and again by the store's unique index on save; the
    per-account limit is a best-effort check against the stored count of
    keys (active and inactive) at the target agency/account.

    Parameters
    ----------
    registry : KeyValidatorRegistry
        Category validators.
    store : PixKeyStore
        Persistence collaborator.
    key_limit_per_account : int
        Maximum number of keys per (agency, account) pair.
    """

    def __init__(
        self,
        registry: KeyValidatorRegistry,
        store: PixKeyStore,
        key_limit_per_account: int = DEFAULT_KEY_LIMIT_PER_ACCOUNT,
    ) -> None:
        if key_limit_per_account < 1:
            raise ConfigurationError(
                f"key_limit_per_account must be >= 1, got {key_limit_per_account}"
            )
        self.registry = registry
        self.store = store
        self.key_limit_per_account = key_limit_per_account

    @classmethod
    def from_config(
        cls,
        config: PixKeysConfig,
        store: PixKeyStore | None = None,
    ) -> PixKeyService:
        """Wire a service with the default validators.

        Parameters
        ----------
        config : PixKeysConfig
            Limit and store settings.
        store : PixKeyStore | None
            Store to use instead of the one described by ``config.store``.

        Returns
        -------
        PixKeyService
            Ready-to-use service.
        """
        config.validate()
        if store is None:
            if config.store.backend == "json":
                store = JsonFilePixKeyStore(config.store.path)
            else:
                store = InMemoryPixKeyStore()
        return cls(default_registry(), store, config.key_limit_per_account)

    def create(
        self,
        category: KeyCategory | str,
        value: str,
        account_type: AccountType | str,
        agency: str,
        account: str,
        holder_name: str,
        holder_surname: str | None = None,
    ) -> str:
        """Register a new key and return its id.

        Raises
        ------
        FormatError
            If ``category`` is missing or unknown, or ``value`` is not valid
            for it.
        BusinessRuleViolation
            If the value is already registered or the account is at its
            key limit.
        ConfigurationError
            If no validator is registered for ``category``.
        """
        category = KeyCategory.parse(category)
        self.registry.lookup(category).validate(value)

        normalized_value = value.strip()
        agency, account = _strip(agency), _strip(account)
        context = {"category": category.value, "agency": agency, "account": account}
        if self.store.find_by_value(normalized_value) is not None:
            logger.warning("Rejected key: value already registered", extra=context)
            raise BusinessRuleViolation(ALREADY_REGISTERED)

        self._check_account_limit(agency, account)

        key = PixKey.create(
            category, normalized_value, account_type, agency, account, holder_name, holder_surname
        )
        try:
            saved = self.store.save(key)
        except DuplicateKeyValueError as e:
            # Lost a race with a concurrent create of the same value
            logger.warning(
                "Rejected key: value registered concurrently", extra={**context, "key_id": key.id}
            )
            raise BusinessRuleViolation(ALREADY_REGISTERED) from e

        logger.info(
            "Created %s key %s for agency %s account %s",
            saved.category.value,
            saved.id,
            saved.agency,
            saved.account,
            extra={**context, "key_id": saved.id},
        )
        return saved.id

    def find_by_id(self, key_id: str) -> PixKey:
        """Return the key with ``key_id`` or raise NotFoundError."""
        key = self.store.find_by_id(key_id)
        if key is None:
            raise NotFoundError(f"pix key not found: {key_id}")
        return key

    def inactivate(self, key_id: str) -> PixKey:
        """Soft-delete a key.

        Raises
        ------
        NotFoundError
            If no key has ``key_id``.
        BusinessRuleViolation
            If the key is already inactive, including when another call
            inactivated it after it was loaded here.
        """
        current = self.find_by_id(key_id)
        try:
            saved = self.store.save(current.inactivate())
        except InactiveKeyOverwriteError as e:
            logger.warning("Key inactivated concurrently", extra={"key_id": key_id})
            raise BusinessRuleViolation(ALREADY_INACTIVE) from e

        logger.info("Inactivated key %s", saved.id, extra={"key_id": saved.id})
        return saved

    def update_account(
        self,
        key_id: str,
        account_type: AccountType | str,
        agency: str,
        account: str,
        holder_name: str,
        holder_surname: str | None = None,
    ) -> PixKey:
        """Link an active key to a new account and/or holder.

        The per-account limit is only checked when the key moves to a
        different (agency, account) pair.

        Raises
        ------
        NotFoundError
            If no key has ``key_id``.
        BusinessRuleViolation
            If the key is inactive (also when inactivated concurrently) or
            the target account is at its limit.
        """
        current = self.find_by_id(key_id)
        if current.is_inactive:
            logger.warning("Rejected update of inactive key", extra={"key_id": key_id})
            raise BusinessRuleViolation(INACTIVE_NOT_UPDATABLE)

        target_agency, target_account = _strip(agency), _strip(account)
        if (target_agency, target_account) != (current.agency, current.account):
            self._check_account_limit(target_agency, target_account)

        updated = current.update_account(
            account_type, target_agency, target_account, holder_name, holder_surname
        )
        try:
            saved = self.store.save(updated)
        except InactiveKeyOverwriteError as e:
            logger.warning("Key inactivated during update", extra={"key_id": key_id})
            raise BusinessRuleViolation(INACTIVE_NOT_UPDATABLE) from e

        logger.info(
            "Updated key %s to agency %s account %s",
            saved.id,
            saved.agency,
            saved.account,
            extra={"key_id": saved.id, "agency": saved.agency, "account": saved.account},
        )
        return saved

    def _check_account_limit(self, agency: str, account: str) -> None:
        count = self.store.count_by_agency_account(agency, account)
        if count >= self.key_limit_per_account:
            logger.warning(
                "Key limit of %d reached",
                self.key_limit_per_account,
                extra={"agency": agency, "account": account},
            )
            raise BusinessRuleViolation(LIMIT_REACHED)


def _strip(value: str | None) -> str | None:
    return value.strip() if value is not None else None
