"""
User repository.

Translates between stored documents and the User entity, implements
keyset pagination over the users collection, and runs every store
interaction through the error boundary so only the service error
taxonomy ever escapes.

Dependencies: backend.boundary.store, backend.models.user, backend.core.exceptions
System role: User persistence operations
"""

from backend.boundary.repositories.error_boundary import run_guarded
from backend.boundary.store.document_store import (
    CREATED_AT,
    DocumentMissingError,
    DocumentStore,
    StoredDocument,
)
from backend.core.exceptions import InvalidArgumentError, NotFoundError
from backend.models.common import PageMeta
from backend.models.user import (
    MAX_PAGE_LIMIT,
    CreateUserRequest,
    PaginateUsersQuery,
    UpdateUserRequest,
    User,
    UserPage,
    UserRole,
)
from backend.observability.log_utils import mask_email


class UserRepository:
    """
    Repository for user records.

    Holds a reference to the document store it was constructed with and
    nothing else; no caching between calls.

    Attributes:
        store: Document store addressing the users collection
    """

    def __init__(self, store: DocumentStore) -> None:
        """
        Initialize repository with a document store.

        Args:
            store: Document store for the users collection
        """
        self.store = store

    @staticmethod
    def to_entity(doc: StoredDocument) -> User:
        """
        Map a stored document to a User.

        Args:
            doc: Stored document snapshot

        Returns:
            User: Domain entity

        Raises:
            KeyError: If a required field is missing from the document
        """
        data = doc.data
        return User(
            id=doc.id,
            name=data["name"],
            email=data["email"],
            role=UserRole(data.get("role", UserRole.USER.value)),
            is_active=data.get("isActive", True),
            created_at=doc.created_at,
            updated_at=doc.updated_at,
        )

    async def create(self, request: CreateUserRequest) -> User:
        """
        Write a new user document and return the stored entity.

        No duplicate check happens here.

        Args:
            request: Validated create request

        Returns:
            User: Freshly read entity with store-assigned id and timestamps
        """

        async def operation() -> User:
            doc_id = await self.store.put(
                {
                    "name": request.name,
                    "email": request.email,
                    "role": request.role.value,
                    "isActive": True,
                }
            )
            doc = await self.store.get(doc_id)
            if doc is None:
                raise RuntimeError(f"Document {doc_id} missing right after write")
            return self.to_entity(doc)

        return await run_guarded("Failed to create user", operation)

    async def find_by_id(self, user_id: str) -> User:
        """
        Fetch a user by id.

        Args:
            user_id: User id

        Returns:
            User: The stored user

        Raises:
            NotFoundError: If no document has this id
        """

        async def operation() -> User:
            doc = await self.store.get(user_id)
            if doc is None:
                raise NotFoundError(user_id)
            return self.to_entity(doc)

        return await run_guarded(f"Failed to fetch user {user_id}", operation, user_id=user_id)

    async def find_by_email(self, email: str) -> User | None:
        """
        Fetch the user holding an email address.

        Args:
            email: Email address, matched exactly

        Returns:
            User if a record holds this email, None otherwise
        """

        async def operation() -> User | None:
            docs = await self.store.query(filters={"email": email}, limit=1)
            if not docs:
                return None
            return self.to_entity(docs[0])

        return await run_guarded(
            "Failed to fetch user by email", operation, email=mask_email(email)
        )

    async def update(self, user_id: str, request: UpdateUserRequest) -> User:
        """
        Merge the explicitly set fields into a user and re-stamp updatedAt.

        Args:
            user_id: User id
            request: Partial update request

        Returns:
            User: Refreshed entity

        Raises:
            NotFoundError: If no document has this id
        """

        async def operation() -> User:
            if await self.store.get(user_id) is None:
                raise NotFoundError(user_id)

            try:
                await self.store.partial_update(user_id, request.changes())
            except DocumentMissingError:
                raise NotFoundError(user_id) from None

            doc = await self.store.get(user_id)
            if doc is None:
                raise NotFoundError(user_id)
            return self.to_entity(doc)

        return await run_guarded(f"Failed to update user {user_id}", operation, user_id=user_id)

    async def remove(self, user_id: str) -> None:
        """
        Delete a user permanently.

        Args:
            user_id: User id

        Raises:
            NotFoundError: If no document has this id
        """

        async def operation() -> None:
            if await self.store.get(user_id) is None:
                raise NotFoundError(user_id)

            try:
                await self.store.delete(user_id)
            except DocumentMissingError:
                raise NotFoundError(user_id) from None

        await run_guarded(f"Failed to delete user {user_id}", operation, user_id=user_id)

    async def list(self, query: PaginateUsersQuery) -> UserPage:
        """
        Return one page of users, newest first.

        Keyset pagination: the cursor is the id of the last record of the
        previous page. One extra document is fetched as a lookahead to
        decide hasNextPage without a count query.

        Args:
            query: Limit, optional cursor and optional role filter

        Returns:
            UserPage: Records plus limit/hasNextPage/nextCursor

        Raises:
            InvalidArgumentError: If limit is out of range or the cursor
                does not reference an existing record
        """
        limit = query.limit
        if not 1 <= limit <= MAX_PAGE_LIMIT:
            raise InvalidArgumentError(
                f"limit must be between 1 and {MAX_PAGE_LIMIT}", field="limit"
            )

        async def operation() -> UserPage:
            start_after = None
            if query.cursor:
                start_after = await self.store.get(query.cursor)
                if start_after is None:
                    raise InvalidArgumentError(
                        f'Invalid cursor: document "{query.cursor}" does not exist',
                        field="cursor",
                    )

            filters = {"role": query.role.value} if query.role else None
            docs = await self.store.query(
                order_by=CREATED_AT,
                descending=True,
                filters=filters,
                start_after=start_after,
                limit=limit + 1,
            )

            has_next_page = len(docs) > limit
            page_docs = docs[:limit]
            next_cursor = page_docs[-1].id if has_next_page else None

            return UserPage(
                data=[self.to_entity(doc) for doc in page_docs],
                meta=PageMeta(limit=limit, has_next_page=has_next_page, next_cursor=next_cursor),
            )

        return await run_guarded("Failed to fetch users", operation, cursor=query.cursor)
