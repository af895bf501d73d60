"""Monthly reporting endpoints for salesboard

This package provides the monthly sales reports: statistics (total amount,
sold and unsold counts), a price-range bar chart, a category pie chart, and
a combined payload of all three. Every report takes a month selector (1-12)
and is scoped to the half-open window computed by ``window.month_window``.

Route handlers delegate to service functions, which query the record store
through the ``RecordStore`` interface."""
