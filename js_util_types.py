import numbers

class Undefined:
  """
  stand-in for javascript's undefined.  there is only ever one
  instance, js_util_types.undefined; it is falsy and prints as
  "undefined".
  """
  _instance = None

  def __new__(cls):
    if cls._instance == None:
      cls._instance = object.__new__(cls)
    return cls._instance

  def __bool__(self):
    return False

  def __str__(self):
    return "undefined"

  def __repr__(self):
    return str(self)

undefined = Undefined()

def is_number(v):
  #bool is a numbers.Number too, but javascript keeps booleans apart
  return isinstance(v, numbers.Number) and not isinstance(v, bool)

def is_primitive(v):
  return v is None or v is undefined or isinstance(v, (bool, str, bytes)) or is_number(v)

def strict_equals(a, b):
  """
  javascript's === operator, which is what Array.indexOf uses.

  primitives compare by value within their own kind (numbers with numbers,
  strings with strings), so 1 === 1.0 but True !== 1 and "1" !== 1.  any
  numbers.Number counts as a number, so Decimal("1.5") === 1.5.
  nan never equals anything.  every other object compares by identity.
  """
  if not is_primitive(a) or not is_primitive(b):
    return a is b

  for t in (bool, str, bytes):
    if isinstance(a, t) or isinstance(b, t):
      return isinstance(a, t) and isinstance(b, t) and a == b

  if is_number(a) and is_number(b):
    return a == b

  #None and undefined
  return a is b

def is_truthy(v):
  """
  javascript truthiness: None, undefined, False, zero, nan and empty
  strings are falsy, every object (even an empty list) is truthy.
  """
  if not is_primitive(v):
    return True
  if is_number(v):
    return v == v and v != 0
  return bool(v)
