"""XML documents served by FakeConnection in tests."""

URL = "https://vcd.example.com"

ORG_NAME = "example-org"
SESSION_HREF = f"{URL}/api/session"
ORG_HREF = f"{URL}/api/org/org-1"

VDC_NAME = "vdc-1"
VDC_HREF = f"{URL}/api/vdc/vdc-1"

CATALOG_NAME = "test-catalog"
CATALOG_HREF = f"{URL}/api/catalog/catalog-1"

MEDIA_NAME = "existing-media.iso"
MEDIA_HREF = f"{URL}/api/media/media-1"
MEDIA_ITEM_HREF = f"{URL}/api/catalogItem/item-media-1"

TEMPLATE_NAME = "base-template"
TEMPLATE_HREF = f"{URL}/api/vAppTemplate/vappTemplate-1"
TEMPLATE_ITEM_HREF = f"{URL}/api/catalogItem/item-template-1"

VAPP_NAME = "test-vapp"
VAPP_HREF = f"{URL}/api/vApp/vapp-1"

VM_NAME = "test-vm"
VM_HREF = f"{URL}/api/vApp/vm-1"
VM_POWER_ON_HREF = f"{VM_HREF}/power/action/powerOn"
VM_POWER_OFF_HREF = f"{VM_HREF}/power/action/powerOff"
VM_UNDEPLOY_HREF = f"{VM_HREF}/action/undeploy"
VM_ATTACH_DISK_HREF = f"{VM_HREF}/disk/action/attach"
VM_DETACH_DISK_HREF = f"{VM_HREF}/disk/action/detach"
VM_INSERT_MEDIA_HREF = f"{VM_HREF}/media/action/insertMedia"
VM_EJECT_MEDIA_HREF = f"{VM_HREF}/media/action/ejectMedia"

OTHER_VM_NAME = "other VM"
OTHER_VM_HREF = f"{URL}/api/vApp/vm-2"

VAPP_POWER_ON_HREF = f"{VAPP_HREF}/power/action/powerOn"
VAPP_POWER_OFF_HREF = f"{VAPP_HREF}/power/action/powerOff"
VAPP_UNDEPLOY_HREF = f"{VAPP_HREF}/action/undeploy"
VAPP_RECOMPOSE_HREF = f"{VAPP_HREF}/action/recomposeVApp"

DISK_NAME = "indy-disk"
DISK_HREF = f"{URL}/api/disk/disk-1"
DISK_ATTACHED_VMS_HREF = f"{DISK_HREF}/attachedVms"

NETWORK_NAME = "org-network"
NETWORK_HREF = f"{URL}/api/admin/network/network-1"

TASK_HREF = f"{URL}/api/task/b2ee6bb6-d70f-4c54-8789-c2fd123c6491"
POWER_ON_OPERATION = (
    "Starting Virtual Machine sc-1f9f883e-968c-4bad-88e3-e7cb36881788"
    "(b2ee6bb6-d70f-4c54-8789-c2fd123c6491)"
)

_NS = (
    'xmlns="http://www.vmware.com/vcloud/v1.5" '
    'xmlns:vcloud="http://www.vmware.com/vcloud/v1.5" '
    'xmlns:ovf="http://schemas.dmtf.org/ovf/envelope/1" '
    'xmlns:rasd="http://schemas.dmtf.org/wbem/wscim/1/cim-schema/2/CIM_ResourceAllocationSettingData"'
)


def _link(rel, href, type_="", name=None):
    name_attr = f' name="{name}"' if name else ""
    type_attr = f' type="{type_}"' if type_ else ""
    return f'<Link rel="{rel}" href="{href}"{type_attr}{name_attr}/>'


def _tasks(tasks):
    if not tasks:
        return ""
    return "<Tasks>" + "".join(tasks) + "</Tasks>"


def task_xml(status="running", href=TASK_HREF, operation=POWER_ON_OPERATION,
             error_message=None, embedded=False):
    error = ""
    if error_message:
        error = (f'<Error message="{error_message}" majorErrorCode="500" '
                 f'minorErrorCode="INTERNAL_SERVER_ERROR"/>')
    ns = "" if embedded else f" {_NS}"
    return (f'<Task{ns} status="{status}" operation="{operation}" '
            f'operationName="vappDeploy" name="task" href="{href}" '
            f'id="urn:vcloud:task:{href.rsplit("/", 1)[-1]}">'
            f'<Progress>0</Progress>{error}</Task>')


def session_xml():
    return (f'<Session {_NS} user="user" org="{ORG_NAME}" href="{SESSION_HREF}">'
            + _link("down", ORG_HREF, "application/vnd.vmware.vcloud.org+xml", ORG_NAME)
            + "</Session>")


def org_xml(catalogs=((CATALOG_NAME, CATALOG_HREF),)):
    links = [_link("down", VDC_HREF, "application/vnd.vmware.vcloud.vdc+xml", VDC_NAME)]
    for name, href in catalogs:
        links.append(_link("down", href, "application/vnd.vmware.vcloud.catalog+xml", name))
    links.append(_link("down", NETWORK_HREF, "application/vnd.vmware.vcloud.orgNetwork+xml", NETWORK_NAME))
    return f'<Org {_NS} name="{ORG_NAME}" href="{ORG_HREF}">' + "".join(links) + "</Org>"


def vdc_xml():
    return (
        f'<Vdc {_NS} name="{VDC_NAME}" href="{VDC_HREF}" status="1">'
        "<ResourceEntities>"
        f'<ResourceEntity type="application/vnd.vmware.vcloud.vApp+xml" name="{VAPP_NAME}" href="{VAPP_HREF}"/>'
        f'<ResourceEntity type="application/vnd.vmware.vcloud.disk+xml" name="{DISK_NAME}" href="{DISK_HREF}"/>'
        f'<ResourceEntity type="application/vnd.vmware.vcloud.media+xml" name="{MEDIA_NAME}" href="{MEDIA_HREF}"/>'
        "</ResourceEntities>"
        "<AvailableNetworks>"
        f'<Network type="application/vnd.vmware.vcloud.network+xml" name="{NETWORK_NAME}" href="{NETWORK_HREF}"/>'
        "</AvailableNetworks>"
        "</Vdc>"
    )


def _hardware_section(disk_href=None):
    items = [
        "<ovf:Item>"
        "<rasd:ElementName>Hard disk 1</rasd:ElementName>"
        '<rasd:HostResource vcloud:capacity="2048"/>'
        "<rasd:ResourceType>17</rasd:ResourceType>"
        "</ovf:Item>",
        "<ovf:Item>"
        "<rasd:ElementName>CD/DVD Drive 1</rasd:ElementName>"
        "<rasd:ResourceType>15</rasd:ResourceType>"
        "</ovf:Item>",
    ]
    if disk_href:
        items.append(
            "<ovf:Item>"
            "<rasd:ElementName>Hard disk 2</rasd:ElementName>"
            f'<rasd:HostResource vcloud:capacity="100" vcloud:disk="{disk_href}"/>'
            "<rasd:ResourceType>17</rasd:ResourceType>"
            "</ovf:Item>"
        )
    return "<ovf:VirtualHardwareSection>" + "".join(items) + "</ovf:VirtualHardwareSection>"


def vm_xml(status="8", name=VM_NAME, href=VM_HREF, disk_href=None, omit_links=(),
           embedded=False):
    links = {
        "up": _link("up", VAPP_HREF, "application/vnd.vmware.vcloud.vApp+xml"),
        "power:powerOn": _link("power:powerOn", f"{href}/power/action/powerOn"),
        "power:powerOff": _link("power:powerOff", f"{href}/power/action/powerOff"),
        "undeploy": _link("undeploy", f"{href}/action/undeploy",
                          "application/vnd.vmware.vcloud.undeployVAppParams+xml"),
        "disk:attach": _link("disk:attach", f"{href}/disk/action/attach",
                             "application/vnd.vmware.vcloud.diskAttachOrDetachParams+xml"),
        "disk:detach": _link("disk:detach", f"{href}/disk/action/detach",
                             "application/vnd.vmware.vcloud.diskAttachOrDetachParams+xml"),
        "media:insertMedia": _link("media:insertMedia", f"{href}/media/action/insertMedia",
                                   "application/vnd.vmware.vcloud.mediaInsertOrEjectParams+xml"),
        "media:ejectMedia": _link("media:ejectMedia", f"{href}/media/action/ejectMedia",
                                  "application/vnd.vmware.vcloud.mediaInsertOrEjectParams+xml"),
    }
    body = "".join(link for rel, link in links.items() if rel not in omit_links)
    ns = "" if embedded else f" {_NS}"
    return (f'<Vm{ns} status="{status}" name="{name}" href="{href}" '
            f'type="application/vnd.vmware.vcloud.vm+xml">'
            + body + _hardware_section(disk_href) + "</Vm>")


def vapp_xml(status="8", vms=((VM_NAME, VM_HREF, "8"),), recompose=True, remove=True,
             tasks=()):
    links = [
        _link("power:powerOn", VAPP_POWER_ON_HREF),
        _link("power:powerOff", VAPP_POWER_OFF_HREF),
        _link("undeploy", VAPP_UNDEPLOY_HREF, "application/vnd.vmware.vcloud.undeployVAppParams+xml"),
    ]
    if recompose:
        links.append(_link("recompose", VAPP_RECOMPOSE_HREF,
                           "application/vnd.vmware.vcloud.recomposeVAppParams+xml"))
    if remove:
        links.append(_link("remove", VAPP_HREF))
    children = "".join(vm_xml(vm_status, vm_name, vm_href, embedded=True)
                       for vm_name, vm_href, vm_status in vms)
    return (f'<VApp {_NS} status="{status}" name="{VAPP_NAME}" href="{VAPP_HREF}" '
            f'type="application/vnd.vmware.vcloud.vApp+xml">'
            + "".join(links) + _tasks(tasks) + f"<Children>{children}</Children></VApp>")


def disk_xml(name=DISK_NAME, href=DISK_HREF, size=100 * 1024 * 1024):
    return (f'<Disk {_NS} status="1" name="{name}" href="{href}" size="{size}" '
            f'type="application/vnd.vmware.vcloud.disk+xml">'
            + _link("down", f"{href}/attachedVms", "application/vnd.vmware.vcloud.vms+xml")
            + "</Disk>")


def attached_vms_xml(vms=()):
    refs = "".join(
        f'<VmReference type="application/vnd.vmware.vcloud.vm+xml" name="{name}" href="{href}"/>'
        for name, href in vms
    )
    return f'<Vms {_NS} href="{DISK_ATTACHED_VMS_HREF}">{refs}</Vms>'


def catalog_xml(items=((MEDIA_NAME, MEDIA_ITEM_HREF), (TEMPLATE_NAME, TEMPLATE_ITEM_HREF))):
    refs = "".join(
        f'<CatalogItem type="application/vnd.vmware.vcloud.catalogItem+xml" name="{name}" href="{href}"/>'
        for name, href in items
    )
    return (f'<Catalog {_NS} name="{CATALOG_NAME}" href="{CATALOG_HREF}">'
            f"<CatalogItems>{refs}</CatalogItems></Catalog>")


def catalog_item_xml(name, href, entity_href, entity_type):
    return (f'<CatalogItem {_NS} name="{name}" href="{href}">'
            f'<Entity type="{entity_type}" name="{name}" href="{entity_href}"/>'
            "</CatalogItem>")


def media_xml(tasks=()):
    return (f'<Media {_NS} status="1" name="{MEDIA_NAME}" href="{MEDIA_HREF}" imageType="iso" '
            f'type="application/vnd.vmware.vcloud.media+xml">'
            + _tasks(tasks) + "</Media>")


def network_xml(ranges=(("10.146.21.150", "10.146.21.189"),)):
    ip_ranges = "".join(
        f"<IpRange><StartAddress>{start}</StartAddress><EndAddress>{end}</EndAddress></IpRange>"
        for start, end in ranges
    )
    return (
        f'<OrgVdcNetwork {_NS} name="{NETWORK_NAME}" href="{NETWORK_HREF}" status="1">'
        "<Configuration><IpScopes><IpScope>"
        "<IsInherited>false</IsInherited><Gateway>10.146.21.1</Gateway>"
        "<Netmask>255.255.255.0</Netmask>"
        f"<IpRanges>{ip_ranges}</IpRanges>"
        "</IpScope></IpScopes><FenceMode>bridged</FenceMode></Configuration>"
        "</OrgVdcNetwork>"
    )
