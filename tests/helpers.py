class ScriptedRandom:
    """Random source that replays a fixed list of draws, then keeps returning the last one."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = []

    def __call__(self, n):
        self.calls.append(n)
        value = self.draws.pop(0) if len(self.draws) > 1 else self.draws[0]
        return value % n
