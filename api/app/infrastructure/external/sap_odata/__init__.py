"""
Integracion de solo lectura con SAP Gateway (OData v2) -> almacen local.

Piezas:
- entity_mappings: tabla compilada de entidades sincronizables
- odata_client: lectura HTTP autenticada (Basic auth) de un entity set
- transformer: proyeccion de registros SAP al esquema local
- credentials: lectura de credenciales desde el entorno

SAP nunca se escribe: todos los efectos quedan en el almacen local.
"""
