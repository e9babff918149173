import sys, traceback, types

from js_global import glob
from js_util_types import undefined, strict_equals, is_truthy

_foreach_depth = 0

class JSError (Exception):
  pass

class JSTypeError (JSError, TypeError):
  pass

class Map:
  """
  ordered key/value container modelled on the es6 Map type.

  keys and values live in two parallel lists and every lookup is a
  linear scan using javascript strict equality (see
  js_util_types.strict_equals), so this is meant for small to medium
  maps.  example:

  m = Map()
  m.set("a", 1)
  m.set("b", 2)
  m.set("a", 3)   #overwrites in place, "a" stays first

  m.entries  -> [["a", 3], ["b", 2]]
  m.get("c") -> undefined
  """

  def __init__(self, entries=None):
    self._keys = []
    self._values = []
    self._warned = False

    if entries is not None:
      for key, value in entries:
        self.set(key, value)

  def _index(self, key):
    for i, k in enumerate(self._keys):
      if strict_equals(k, key):
        return i
    return -1

  @property
  def size(self):
    return len(self._keys)

  #always 0, as per the es6 spec
  @property
  def length(self):
    return 0

  @property
  def keys(self):
    return list(self._keys)

  @property
  def values(self):
    return list(self._values)

  @property
  def entries(self):
    output = []
    for i in range(len(self._keys)):
      output.append([self._keys[i], self._values[i]])
    return output

  def clear(self):
    del self._keys[:]
    del self._values[:]
    self._warned = False
    return 0

  def delete(self, key):
    i = self._index(key)
    if i < 0:
      return False

    self._keys.pop(i)
    self._values.pop(i)
    return True

  def get(self, key, default=undefined):
    i = self._index(key)
    if i < 0:
      return default
    return self._values[i]

  def has(self, key):
    return self._index(key) >= 0

  def set(self, key, value):
    i = self._index(key)
    if i >= 0:
      self._values[i] = value
      return

    self._keys.append(key)
    self._values.append(value)

    if glob.g_warn_large_maps and not self._warned and len(self._keys) > glob.g_large_map_size:
      self._warned = True
      sys.stderr.write("WARNING: Map holds %d entries; key lookups are linear scans.\n" % len(self._keys))

  def forEach(self, fn, context=None):
    """
    calls fn(value, key, map) for each entry, in insertion order.

    keys and values are copied before the loop, so entries added or
    removed by fn don't change what gets visited.

    a truthy context (javascript truthiness) binds a plain function to
    it, which then gets called as fn(context, value, key, map).  bound
    methods and other callables already carry their own self and are
    always called as fn(value, key, map).
    """
    global _foreach_depth

    keys = self.keys
    values = self.values

    call = fn
    if is_truthy(context) and isinstance(fn, types.FunctionType):
      call = types.MethodType(fn, context)

    _foreach_depth += 1
    try:
      for i in range(len(values)):
        if not callable(fn):
          raise JSTypeError("%r is not a function" % (fn,))

        call(values[i], keys[i], self)
    except Exception:
      #nested forEach calls see the same exception, print it once
      if glob.g_print_stack and _foreach_depth == 1:
        traceback.print_exc()
      raise
    finally:
      _foreach_depth -= 1

  def __getitem__(self, key):
    i = self._index(key)
    if i < 0:
      raise KeyError(key)
    return self._values[i]

  def __setitem__(self, key, value):
    self.set(key, value)

  def __delitem__(self, key):
    if not self.delete(key):
      raise KeyError(key)

  def __contains__(self, key):
    return self.has(key)

  def __len__(self):
    return len(self._keys)

  def __iter__(self):
    return iter(self.keys)

  def __str__(self):
    s = "Map{"
    for i, k in enumerate(self._keys):
      if i > 0: s += ", "
      s += "%s: %s" % (str(k), str(self._values[i]))
    s += "}"

    return s

  def __repr__(self):
    return str(self)
