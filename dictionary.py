"""
parliament Dict
Persistent key/value mapping stored as a chain of override layers

Every version carries its own tuple of visible keys, so deletes and key
selection never touch stored values. Lookups walk from the newest layer
towards the root and stop at the first layer that defines the key.
"""

from typing import Any, Dict as _Dict, Iterable, Iterator, Optional, Tuple
import threading
import weakref

from combinators import curry
from logger import logger
from utilities import to_key


# Guards the ownership check and the in-place write of the set fast path
_layer_lock = threading.Lock()


class _Layer:
  """Key/value storage shared by the versions built on top of it"""

  __slots__ = ('values', 'owner')

  def __init__(self, values: _Dict[str, Any]):
    self.values = values
    # Weak, so a layer never keeps its newest version alive
    self.owner = None

  def owned_by(self, node: 'Dict') -> bool:
    """Only the owner may add new keys in place"""
    return self.owner is not None and self.owner() is node

  def claim(self, node: 'Dict') -> None:
    self.owner = weakref.ref(node)


class Dict:
  """
  Immutable dictionary with structural sharing

  Keys are always stored as strings, so 1 and "1" are the same key.
  """

  __slots__ = ('_layer', '_parent', '_keys', '_key_set', '__weakref__')

  def __init__(self, seed: Any = None):
    values = {to_key(k): v for k, v in dict(seed or {}).items()}
    layer = _Layer(values)
    _init_node(self, layer, None, tuple(values))
    layer.claim(self)

  # ==================== QUERIES ====================

  def keys(self) -> Tuple[str, ...]:
    """Visible keys in insertion order"""
    return self._keys

  def has(self, key: Any) -> bool:
    return to_key(key) in self._key_set

  def get(self, key: Any, default: Any = None) -> Any:
    """Value stored under key, or default if key is not visible"""
    key = to_key(key)
    if key not in self._key_set:
      return default

    d = self
    while d is not None:
      if key in d._layer.values:
        return d._layer.values[key]
      d = d._parent
    return default

  def to_dict(self) -> _Dict[str, Any]:
    """Converts the dict to a plain dict"""
    return {key: self.get(key) for key in self._keys}

  def __getitem__(self, key: Any) -> Any:
    if not self.has(key):
      raise KeyError(key)
    return self.get(key)

  def __contains__(self, key: Any) -> bool:
    return self.has(key)

  def __iter__(self) -> Iterator[str]:
    return iter(self._keys)

  def __len__(self) -> int:
    return len(self._keys)

  def __eq__(self, other: Any) -> bool:
    if not isinstance(other, Dict):
      return NotImplemented
    return self.to_dict() == other.to_dict()

  __hash__ = None

  def __repr__(self) -> str:
    return f"Dict({self.to_dict()!r})"

  # ==================== EDITS ====================

  def set(self, key: Any, value: Any) -> 'Dict':
    """Returns a dict with key set to value"""
    key = to_key(key)

    if key in self._key_set:
      logger.debug("Dict override layer for existing key %r", key)
      return _create({key: value}, self, self._keys)

    layer = self._layer
    with _layer_lock:
      if layer.owned_by(self):
        layer.values[key] = value
        d = _create_over(layer, self._parent, self._keys + (key,))
        layer.claim(d)
        return d

    logger.debug("Dict layer already extended, new layer for key %r", key)
    return _create({key: value}, self, self._keys + (key,))

  def delete(self, key: Any) -> 'Dict':
    """Returns a dict without key; stored values are left in place"""
    key = to_key(key)
    if key not in self._key_set:
      return self
    return _create_over(self._layer, self._parent, tuple(k for k in self._keys if k != key))

  def select_keys(self, keys: Iterable[Any]) -> 'Dict':
    """Keep only the given keys, in this dict's key order"""
    wanted = {to_key(k) for k in keys}
    return _create_over(self._layer, self._parent, tuple(k for k in self._keys if k in wanted))

  def omit_keys(self, keys: Iterable[Any]) -> 'Dict':
    """Drop the given keys; the complement of select_keys"""
    unwanted = {to_key(k) for k in keys}
    return _create_over(self._layer, self._parent, tuple(k for k in self._keys if k not in unwanted))


# ============================================================================
# NODE CONSTRUCTION
# ============================================================================

def _init_node(node: Dict, layer: _Layer, parent: Optional[Dict], keys: Tuple[str, ...]) -> None:
  node._layer = layer
  node._parent = parent
  node._keys = keys
  node._key_set = frozenset(keys)


def _create_over(layer: _Layer, parent: Optional[Dict], keys: Tuple[str, ...]) -> Dict:
  node = Dict.__new__(Dict)
  _init_node(node, layer, parent, keys)
  return node


def _create(values: _Dict[str, Any], parent: Optional[Dict], keys: Tuple[str, ...]) -> Dict:
  layer = _Layer(values)
  node = _create_over(layer, parent, keys)
  layer.claim(node)
  return node


# ============================================================================
# CURRIED FORMS (dict last)
# ============================================================================

@curry
def has(key: Any, d: Dict) -> bool:
  return d.has(key)


@curry
def get(key: Any, d: Dict) -> Any:
  return d.get(key)


@curry
def set(key: Any, value: Any, d: Dict) -> Dict:
  return d.set(key, value)


@curry
def delete(key: Any, d: Dict) -> Dict:
  return d.delete(key)


@curry
def select_keys(keys: Iterable[Any], d: Dict) -> Dict:
  return d.select_keys(keys)


@curry
def omit_keys(keys: Iterable[Any], d: Dict) -> Dict:
  return d.omit_keys(keys)


def to_dict(d: Dict) -> _Dict[str, Any]:
  return d.to_dict()
