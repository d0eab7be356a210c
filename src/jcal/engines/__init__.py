"""Calendar engines: leap rules, month tables and the epoch-day mapping."""
