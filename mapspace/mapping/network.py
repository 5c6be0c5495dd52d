"""
Named collection of layer workloads.
"""

from collections import OrderedDict

from .workload import Workload


class Network(object):
    """
    An ordered set of named layer workloads of one neural network.
    """

    def __init__(self, net_name):
        self.net_name = net_name
        self.layer_dict = OrderedDict()

    def add(self, layer_name, workload):
        if not isinstance(workload, Workload):
            raise TypeError('Network: workload must be a Workload instance.')
        if layer_name in self.layer_dict:
            raise KeyError('Network: layer {} already exists.'
                           .format(layer_name))
        self.layer_dict[layer_name] = workload

    def __contains__(self, layer_name):
        return layer_name in self.layer_dict

    def __getitem__(self, layer_name):
        return self.layer_dict[layer_name]

    def __iter__(self):
        return iter(self.layer_dict)

    def __len__(self):
        return len(self.layer_dict)

    def __repr__(self):
        return '{}({}, {} layers)'.format(
            self.__class__.__name__, repr(self.net_name), len(self))
