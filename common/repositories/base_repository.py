from typing import TypeVar, Generic, List, Optional
from django.db.models import Model, QuerySet

T = TypeVar('T', bound=Model)


class BaseRepository(Generic[T]):
    """
    Acceso a datos genérico sobre un modelo de Django.

    Cada repositorio concreto solo define `model`. `save` inserta cuando
    la instancia no tiene pk y actualiza cuando ya la tiene.
    """
    model = None

    def get_queryset(self) -> QuerySet:
        return self.model._default_manager.all()

    def find_all(self) -> List[T]:
        return list(self.get_queryset())

    def find_by_id(self, pk) -> Optional[T]:
        return self.get_queryset().filter(pk=pk).first()

    def save(self, instancia: T) -> T:
        instancia.full_clean()
        instancia.save()
        return instancia

    def delete_by_id(self, pk) -> None:
        # Si no existe no hace nada
        self.get_queryset().filter(pk=pk).delete()
