class AbstractGlob:
  """
  settings holder.  every setting is a g_ prefixed class attribute on
  Glob; instances override them per attribute.
  """

  def reset(self):
    self.load(Glob())

  def copy(self):
    g = Glob()
    g.load(self)
    return g

  def load(self, g):
    for attr in dir(g):
      if not attr.startswith("g_"): continue

      setattr(self, attr, getattr(g, attr))
    return g

class Glob(AbstractGlob):
  #print a traceback when a forEach callback raises
  g_print_stack = False

  #warn on stderr once a Map grows past g_large_map_size entries
  g_warn_large_maps = True
  g_large_map_size = 512

glob = Glob()
