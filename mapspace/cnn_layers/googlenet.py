from mapspace.mapping import Network, Workload

'''
GoogLeNet

Szegedy, Liu, Jia, Sermanet, Reed, Anguelov, Erhan, Vanhoucke, and
Rabinovich, 2014

Convolution branches of the inception modules.
'''

NN = Network('GoogLeNet')

NN.add('inception_3a-pool_proj', Workload.conv(192, 32, 28, 1))
NN.add('inception_3a-1x1', Workload.conv(192, 64, 28, 1))
NN.add('inception_3a-3x3_reduce', Workload.conv(192, 96, 28, 1))
NN.add('inception_3a-3x3', Workload.conv(96, 128, 28, 3))
NN.add('inception_3a-5x5_reduce', Workload.conv(192, 16, 28, 1))
NN.add('inception_3a-5x5', Workload.conv(16, 32, 28, 5))

NN.add('inception_3b-pool_proj', Workload.conv(256, 64, 28, 1))
NN.add('inception_3b-1x1', Workload.conv(256, 128, 28, 1))
NN.add('inception_3b-3x3_reduce', Workload.conv(256, 128, 28, 1))
NN.add('inception_3b-3x3', Workload.conv(128, 192, 28, 3))
NN.add('inception_3b-5x5_reduce', Workload.conv(256, 32, 28, 1))
NN.add('inception_3b-5x5', Workload.conv(32, 96, 28, 5))

NN.add('inception_4a-pool_proj', Workload.conv(480, 64, 14, 1))
NN.add('inception_4a-1x1', Workload.conv(480, 192, 14, 1))
NN.add('inception_4a-3x3_reduce', Workload.conv(480, 96, 14, 1))
NN.add('inception_4a-3x3', Workload.conv(96, 208, 14, 3))
NN.add('inception_4a-5x5_reduce', Workload.conv(480, 16, 14, 1))
NN.add('inception_4a-5x5', Workload.conv(16, 48, 14, 5))

NN.add('inception_4b-pool_proj', Workload.conv(512, 64, 14, 1))
NN.add('inception_4b-1x1', Workload.conv(512, 160, 14, 1))
NN.add('inception_4b-3x3_reduce', Workload.conv(512, 112, 14, 1))
NN.add('inception_4b-3x3', Workload.conv(112, 224, 14, 3))
NN.add('inception_4b-5x5_reduce', Workload.conv(512, 24, 14, 1))
NN.add('inception_4b-5x5', Workload.conv(24, 64, 14, 5))

NN.add('inception_4c-pool_proj', Workload.conv(512, 64, 14, 1))
NN.add('inception_4c-1x1', Workload.conv(512, 128, 14, 1))
NN.add('inception_4c-3x3_reduce', Workload.conv(512, 128, 14, 1))
NN.add('inception_4c-3x3', Workload.conv(128, 256, 14, 3))
NN.add('inception_4c-5x5_reduce', Workload.conv(512, 24, 14, 1))
NN.add('inception_4c-5x5', Workload.conv(24, 64, 14, 5))

NN.add('inception_4d-pool_proj', Workload.conv(512, 64, 14, 1))
NN.add('inception_4d-1x1', Workload.conv(512, 112, 14, 1))
NN.add('inception_4d-3x3_reduce', Workload.conv(512, 144, 14, 1))
NN.add('inception_4d-3x3', Workload.conv(144, 288, 14, 3))
NN.add('inception_4d-5x5_reduce', Workload.conv(512, 32, 14, 1))
NN.add('inception_4d-5x5', Workload.conv(32, 64, 14, 5))

NN.add('inception_4e-pool_proj', Workload.conv(528, 128, 14, 1))
NN.add('inception_4e-1x1', Workload.conv(528, 256, 14, 1))
NN.add('inception_4e-3x3_reduce', Workload.conv(528, 160, 14, 1))
NN.add('inception_4e-3x3', Workload.conv(160, 320, 14, 3))
NN.add('inception_4e-5x5_reduce', Workload.conv(528, 32, 14, 1))
NN.add('inception_4e-5x5', Workload.conv(32, 128, 14, 5))

NN.add('inception_5a-pool_proj', Workload.conv(832, 128, 7, 1))
NN.add('inception_5a-1x1', Workload.conv(832, 256, 7, 1))
NN.add('inception_5a-3x3_reduce', Workload.conv(832, 160, 7, 1))
NN.add('inception_5a-3x3', Workload.conv(160, 320, 7, 3))
NN.add('inception_5a-5x5_reduce', Workload.conv(832, 32, 7, 1))
NN.add('inception_5a-5x5', Workload.conv(32, 128, 7, 5))

NN.add('inception_5b-pool_proj', Workload.conv(832, 128, 7, 1))
NN.add('inception_5b-1x1', Workload.conv(832, 384, 7, 1))
NN.add('inception_5b-3x3_reduce', Workload.conv(832, 192, 7, 1))
NN.add('inception_5b-3x3', Workload.conv(192, 384, 7, 3))
NN.add('inception_5b-5x5_reduce', Workload.conv(832, 48, 7, 1))
NN.add('inception_5b-5x5', Workload.conv(48, 128, 7, 5))
