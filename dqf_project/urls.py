from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    path('', include('drivers.urls')),   # ✅ 司机入职：仪表盘、新增司机、DQF 附件
]

# ✅ 始终启用静态资源路由，不依赖 DEBUG 设置
urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
