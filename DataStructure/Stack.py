from typing import Generic, List, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Se lanza al hacer pop o peek sobre una pila vacía."""


class Stack(Generic[T]):
    """
    Pila (LIFO) genérica sin límite de tamaño.

    El tope es siempre el último elemento agregado que no se ha extraído.
    Solo se puede observar o extraer el tope.

    Complejidad: O(1) push/pop, O(1) peek
    """

    def __init__(self):
        self._items: List[T] = []

    def push(self, item: T) -> None:
        """Agrega item al tope de la pila"""
        self._items.append(item)

    def pop(self) -> T:
        """Extrae y retorna el item del tope"""
        if self.is_empty():
            raise EmptyStackError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Retorna el item del tope sin extraerlo"""
        if self.is_empty():
            raise EmptyStackError("peek from empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Verifica si la pila está vacía"""
        return len(self._items) == 0

    def size(self) -> int:
        """Retorna el tamaño de la pila"""
        return len(self._items)

    def clear(self):
        """Limpia la pila"""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return len(self._items) > 0

    def __repr__(self) -> str:
        return f"Stack(size={len(self._items)})"
