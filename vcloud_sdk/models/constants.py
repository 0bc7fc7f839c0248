"""Namespaces, media types and link relations used on the vCloud wire."""

VCLOUD_NS = "http://www.vmware.com/vcloud/v1.5"
OVF_NS = "http://schemas.dmtf.org/ovf/envelope/1"
RASD_NS = "http://schemas.dmtf.org/wbem/wscim/1/cim-schema/2/CIM_ResourceAllocationSettingData"

MEDIA_TYPE = {
    "CATALOG": "application/vnd.vmware.vcloud.catalog+xml",
    "DISK": "application/vnd.vmware.vcloud.disk+xml",
    "DISK_ATTACH_DETACH_PARAMS": "application/vnd.vmware.vcloud.diskAttachOrDetachParams+xml",
    "MEDIA": "application/vnd.vmware.vcloud.media+xml",
    "MEDIA_INSERT_EJECT_PARAMS": "application/vnd.vmware.vcloud.mediaInsertOrEjectParams+xml",
    "ORG": "application/vnd.vmware.vcloud.org+xml",
    "ORG_VDC_NETWORK": "application/vnd.vmware.vcloud.orgNetwork+xml",
    "RECOMPOSE_VAPP_PARAMS": "application/vnd.vmware.vcloud.recomposeVAppParams+xml",
    "UNDEPLOY_VAPP_PARAMS": "application/vnd.vmware.vcloud.undeployVAppParams+xml",
    "VAPP": "application/vnd.vmware.vcloud.vApp+xml",
    "VAPP_TEMPLATE": "application/vnd.vmware.vcloud.vAppTemplate+xml",
    "VDC": "application/vnd.vmware.vcloud.vdc+xml",
    "VMS": "application/vnd.vmware.vcloud.vms+xml",
}

# Link rel values
REL_UP = "up"
REL_DOWN = "down"
REL_REMOVE = "remove"
REL_POWER_ON = "power:powerOn"
REL_POWER_OFF = "power:powerOff"
REL_UNDEPLOY = "undeploy"
REL_RECOMPOSE = "recompose"
REL_DISK_ATTACH = "disk:attach"
REL_DISK_DETACH = "disk:detach"
REL_INSERT_MEDIA = "media:insertMedia"
REL_EJECT_MEDIA = "media:ejectMedia"

# rasd:ResourceType of a hard disk in a VirtualHardwareSection
HARD_DISK_RESOURCE_TYPE = "17"
