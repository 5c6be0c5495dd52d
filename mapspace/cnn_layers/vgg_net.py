from mapspace.mapping import Network, Workload

'''
VGGNet-16

Simonyan and Zisserman, 2014
'''

NN = Network('VGGNet')

NN.add('VGG_conv1_1', Workload.conv(3, 64, 224, 3))
NN.add('VGG_conv1_2', Workload.conv(64, 64, 224, 3))
NN.add('VGG_conv2_1', Workload.conv(64, 128, 112, 3))
NN.add('VGG_conv2_2', Workload.conv(128, 128, 112, 3))
NN.add('VGG_conv3_1', Workload.conv(128, 256, 56, 3))
NN.add('VGG_conv3_2', Workload.conv(256, 256, 56, 3))
NN.add('VGG_conv3_3', Workload.conv(256, 256, 56, 3))
NN.add('VGG_conv4_1', Workload.conv(256, 512, 28, 3))
NN.add('VGG_conv4_2', Workload.conv(512, 512, 28, 3))
NN.add('VGG_conv4_3', Workload.conv(512, 512, 28, 3))
NN.add('VGG_conv5_1', Workload.conv(512, 512, 14, 3))
NN.add('VGG_conv5_2', Workload.conv(512, 512, 14, 3))
NN.add('VGG_conv5_3', Workload.conv(512, 512, 14, 3))
