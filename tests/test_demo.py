from bintreekit.demo import queue_demo, stack_demo


def test_stack_demo_opens_with_empty_check():
    assert stack_demo().splitlines()[0] == "Is stack empty? Yes"


def test_stack_demo_pops_in_reverse_order():
    lines = stack_demo().splitlines()
    popped = [line for line in lines if line.startswith("Popped: ")]
    assert popped == ["Popped: third", "Popped: second", "Popped: first"]


def test_stack_demo_ends_empty():
    lines = stack_demo().splitlines()
    assert lines[-1] == "Stack is empty"
    assert lines[-2] == "Stack is empty"


def test_queue_demo_dequeues_front_first():
    lines = queue_demo().splitlines()
    dequeued = [line for line in lines if line.startswith("deQueue: ")]
    assert dequeued == ["deQueue: 10", "deQueue: 20", "deQueue: 30"]


def test_queue_demo_final_state():
    lines = queue_demo().splitlines()
    assert lines[:4] == ["[0] 10", "[1] 20", "[2] 30", "[3] 40"]
    assert lines[-1] == "[0] 100"
    assert lines[-2] == "[0] 40"