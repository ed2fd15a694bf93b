# utils/report.py


def format_snapshot(snapshot):
    """Lines for one generation: header, then one Return/Risk line per individual."""
    lines = ["Generation %d: " % snapshot.generation]
    for vec in snapshot.objectives:
        lines.append("Return: %s, Risk: %s" % (vec.return_value, vec.risk_value))
    return lines


def format_allocation(portfolio, names):
    return ", ".join("%s=%.2f%%" % (name, 100 * w) for name, w in zip(names, portfolio.weights))
