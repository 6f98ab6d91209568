from models.unit import OccupancyRecord, Unit
from models.selection import ActionMessage, Selection, SelectionEvent, SelectionState
from models.view import CardItem, FilterState, GridRow, HeatmapCell, ListGroup, ListItem
