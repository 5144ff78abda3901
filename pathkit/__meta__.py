"""Meta related things."""

version_info = (1, 0, 0, 'final')

__version_info__ = version_info
__version__ = '{}.{}.{}'.format(*version_info[:3])
version = __version__
