class Connection:
    """
    A weighted edge leaving a neuron, with the delta used for momentum.

    Weights live in the owning neuron's contiguous arrays; a Connection is a
    view onto one slot of them, so writes go straight to the neuron.
    """
    __slots__ = ("_neuron", "_index")

    def __init__(self, neuron, index):
        self._neuron = neuron
        self._index = index

    @property
    def weight(self):
        return float(self._neuron.weights[self._index])

    @weight.setter
    def weight(self, value):
        self._neuron.weights[self._index] = value

    @property
    def delta_weight(self):
        """Change applied by the last weight update."""
        return float(self._neuron.delta_weights[self._index])

    @delta_weight.setter
    def delta_weight(self, value):
        self._neuron.delta_weights[self._index] = value

    @property
    def target_index(self):
        return self._index

    def __repr__(self):
        return f"Connection(weight={self.weight}, delta_weight={self.delta_weight})"
