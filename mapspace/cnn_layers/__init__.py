from collections.abc import Mapping
from types import MappingProxyType


def import_network(name):
    """
    Import an example network.
    """
    import importlib

    if name not in all_networks():
        raise ImportError('cnn_layers: NN {} has not been defined!'.format(name))
    netmod = importlib.import_module('.' + name, 'mapspace.cnn_layers')
    network = netmod.NN
    return network


def all_networks():
    """
    Get all defined networks.
    """
    import os

    nns_dir = os.path.dirname(os.path.abspath(__file__))
    nns = [f[:-len('.py')] for f in os.listdir(nns_dir)
           if f.endswith('.py') and not f.startswith('__')]
    return list(sorted(nns))


class LayerCatalog(Mapping):
    """
    Read-only lookup of layer workloads by layer name, across networks.
    Build it once and hand it to whoever needs to resolve layer names.
    """

    def __init__(self, networks):
        layers = dict()
        for network in networks:
            for layer_name in network:
                if layer_name in layers:
                    raise ValueError('LayerCatalog: layer {} is defined more '
                                     'than once'.format(layer_name))
                layers[layer_name] = network[layer_name]
        self._layers = MappingProxyType(layers)

    @classmethod
    def load(cls, names=None):
        """
        Catalog of the given example networks, all of them by default.
        """
        if names is None:
            names = all_networks()
        return cls([import_network(name) for name in names])

    def get_layer_bounds(self, layer_name, pad_primes=True):
        """
        Workload of the named layer, optionally with hard-to-factor bounds
        rounded to a nearby composite.
        """
        if layer_name not in self._layers:
            raise ValueError('LayerCatalog: layer {} not found in dictionary.'
                             .format(layer_name))
        workload = self._layers[layer_name]
        if pad_primes:
            workload = workload.pad_primes()
        return workload

    def __getitem__(self, layer_name):
        return self._layers[layer_name]

    def __iter__(self):
        return iter(self._layers)

    def __len__(self):
        return len(self._layers)
