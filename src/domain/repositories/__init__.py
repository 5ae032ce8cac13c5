from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.db_models import Quiz, User

class IQuizRepository(ABC):
    """Interface for a quiz repository."""
    @abstractmethod
    def get_by_id(self, quiz_id: int) -> Optional[Quiz]:
        pass

    @abstractmethod
    def create(self, quiz: Quiz) -> Quiz:
        """Insert the quiz, assigning and returning it with a new integer id."""
        pass

    @abstractmethod
    def update(self, quiz: Quiz) -> bool:
        """Rewrite the stored quiz; False when no row matched."""
        pass

    @abstractmethod
    def delete(self, quiz_id: int) -> bool:
        """Remove the quiz; False when no row matched."""
        pass

    @abstractmethod
    def list_latest(self, limit: int) -> List[Quiz]:
        """Newest first by created_date, ties by id ascending."""
        pass

    @abstractmethod
    def list_by_title(self, limit: int) -> List[Quiz]:
        """Title ascending (code point order), ties by id ascending."""
        pass

    @abstractmethod
    def list_all(self) -> List[Quiz]:
        pass

class IUserRepository(ABC):
    """Interface for a user repository."""
    @abstractmethod
    def get_by_user_name(self, user_name: str) -> Optional[User]:
        pass

    @abstractmethod
    def create(self, user: User) -> None:
        pass
