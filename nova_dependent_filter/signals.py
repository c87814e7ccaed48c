"""Panel lifecycle signals."""

from django.dispatch import Signal

# Sent once for every request handled under the ``nova`` middleware group,
# before the view runs. Receivers get ``request`` as a keyword argument.
serving_nova = Signal()

__all__ = ["serving_nova"]
