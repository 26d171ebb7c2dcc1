"""A* search over :class:`~grid_astar.core.grid.Grid`."""
