import logging


def estimate_backlog(pending_count, running_task_count):
    """
    Estimate the backlog per running task.

    With zero or one running task the whole backlog sits on that task;
    otherwise it is split evenly and rounded down. The result is never
    below 1: CloudWatch puts target tracking alarms into INSUFFICIENT_DATA
    when the metric is 0 and scale-in is then never evaluated.

    Args:
        pending_count: Number of items waiting in the queue
        running_task_count: Number of running tasks

    Returns:
        int: Backlog per task, at least 1

    Raises:
        ValueError: If either count is negative
    """
    if pending_count < 0 or running_task_count < 0:
        raise ValueError(f"Counts must be non-negative, got pending={pending_count}, "
                         f"running={running_task_count}")

    if running_task_count <= 1:
        backlog = pending_count
    else:
        backlog = pending_count // running_task_count

    # Target tracking limitation: a 0 value leaves the alarm in INSUFFICIENT_DATA
    if backlog < 1:
        backlog = 1

    logging.info(f"Estimated backlog per instance: {backlog}")
    return backlog
